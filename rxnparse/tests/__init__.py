from rxnparse.logging import setup_logger
import logging

# pytest captures log output itself - console_output=False avoids
# duplication
setup_logger(level=logging.DEBUG, console_output=False)
