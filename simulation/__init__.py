from .errors import ConfigError, ApproachNotFoundError, DuplicateApproachError
from .approach import Approach, ApproachSnapshot, ApproachRegistry
from .arrivals import ArrivalGenerator
from .traffic_light import TimingPlan, Allocation, TrafficLightController
from .events import Event, NoLog, BufferedLog, StreamedLog, export_csv
