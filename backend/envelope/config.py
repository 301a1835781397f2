# envelope/config.py
import os
from dotenv import load_dotenv

# load .env from the working directory
load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH")

# Largest value the demo /echo route answers with a success envelope
ECHO_MAX = int(os.getenv("ECHO_MAX", "1000"))
