""" 
A simple Flask app exposing a token-protected to-do list API:
"""

import logging

from todo_app import create_app
from todo_app.config import Config

config = Config.from_env()

logging.basicConfig(level=config.log_level)

app = create_app(config=config)

if __name__ == '__main__':
    # Run Flask app on port 5001 unless PORT says otherwise
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
