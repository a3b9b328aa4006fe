from .config import Config
from .store import ActivityStore
from .activity_file import ActivityFile
from .workspace import Workspace
