"""
Environment configuration for flowplanner.
Values come from the process environment, optionally seeded from a .env file.
"""

import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./flowplanner.db")
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# Timezone used to compute "now" for scoring and flow recommendations
TIMEZONE = os.getenv("TIMEZONE", "Europe/Amsterdam")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Nightly auto-scheduling
AUTO_SCHEDULE_MAX_URGENT = int(os.getenv("AUTO_SCHEDULE_MAX_URGENT", "3"))
AUTO_SCHEDULE_MAX_TASKS = int(os.getenv("AUTO_SCHEDULE_MAX_TASKS", "6"))
