from pathlib import Path

# Repo-root conventional directories/files (overrideable via environment)
CONFIG_DIR = Path("configs")
CONFIG_FILE = CONFIG_DIR / "phenotypes.yaml"

# Environment variables
CONFIG_ENV_VAR = "PHENOTYPES_CONFIG"
LOG_LEVEL_ENV_VAR = "PHENOTYPES_LOG_LEVEL"
