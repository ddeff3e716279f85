from setuptools import setup, find_packages

setup(
    name="signal-mind",
    version="1.0.0",
    description="Adaptive green-time allocation and discrete-time intersection simulator",
    author="Trident Academy Hackathon Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "matplotlib>=3.7.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "signal-mind=main:main",
        ],
    },
)
