from .configuration import LogConfiguration
from .configuration_presets import PresetType, get_preset, get_preset_type, set_preset_type, update_preset
from .configuration_others import update_other_loggers
