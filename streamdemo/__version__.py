__title__ = "streamdemo"
__description__ = "Demonstrate splitting console output between stdout and stderr with a custom exit code."
__url__ = "https://github.com/streamdemo/streamdemo"
__version__ = "1.0.0"
__license__ = "GPLv3"
