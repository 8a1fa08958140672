import os

# Settings are read at import time. Loaded by pytest before any test module,
# so no test can build the engine from the MySQL defaults.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"
