"""Fixed names and locations used by git-thing."""

APP_NAME = "git-thing"

# <home>/.config/git-thing/config.json
CONFIG_ROOT = ".config"
CONFIG_FILE_NAME = "config.json"

# <home>/.git-credentials
CREDENTIALS_FILE_NAME = ".git-credentials"
CREDENTIALS_HOST = "github.com"

# Both files hold access tokens
PRIVATE_FILE_MODE = 0o600

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
