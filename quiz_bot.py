import sys
import logging
from quiz_server import QuizServer

log_level = (sys.argv[1:2] or ['ERROR'])[0].upper()
config_filename = (sys.argv[2:3] or ['config.json'])[0]
logging.basicConfig(level = log_level)

server = QuizServer(config_filename)

try:
    server.run()
except KeyboardInterrupt:
    logging.info('Interrupted')
