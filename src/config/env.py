# src/config/env.py
import os

# Environment constants to avoid typos in comparisons
ENV_DEV = "dev"
ENV_PROD = "prod"

# "dev" seeds the simulation RNG and logs more; defaults to "prod"
APP_ENV = os.getenv("APP_ENV", ENV_PROD).lower()
