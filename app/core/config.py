from config import Config, Environment  # api specific config
CFG = Config[Environment]

PROJECT_NAME = "CROWDFUND"
API_V1_STR = "/api"
