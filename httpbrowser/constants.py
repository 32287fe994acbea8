APP_NAME = "httpbrowser"
DEFAULT_MAX_REDIRECTS = 10
DEFAULT_FOLLOW_REDIRECTS = True
DEFAULT_METHOD = "GET"
REDIRECT_STATUS_MIN = 300
REDIRECT_STATUS_MAX = 399
ALLOWED_SCHEMES = {"http", "https"}
BODYLESS_METHODS = {"GET", "HEAD"}
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
CONFIG_DIR_ENV = "HTTPBROWSER_CONFIG_DIR"
