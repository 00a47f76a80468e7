# Default configuration file, relative to the working directory
DEFAULT_CONFIG_PATH = "configs/config.yaml"

# Column layout of the parameter report
DEFAULT_REPORT_WIDTH = 32
DEFAULT_REPORT_FILL = " "

# Treat parameters rejected by a term as errors
DEFAULT_STRICT = False

DEFAULT_LOG_LEVEL = "INFO"
