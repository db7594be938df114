import logging
from logging import StreamHandler


logging.addLevelName(logging.WARN, "WARN")  # instead of "WARNING", so that it takes less space...
formatter = logging.Formatter('<<%(asctime)s|%(levelname)-5s|%(name)-25s>>|%(message)s', datefmt='%H:%M:%S')
handler = StreamHandler()
handler.setFormatter(formatter)
logging.root.addHandler(handler)
