
# items_shared package re-exports
from .config import Settings, load_settings
from .logger import get_logger
