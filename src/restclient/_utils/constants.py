# Environment variables
ENV_ENDPOINT = "RESTCLIENT_ENDPOINT"
ENV_BODY_TYPE = "RESTCLIENT_BODY_TYPE"
ENV_TIMEOUT = "RESTCLIENT_TIMEOUT"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"
HEADER_AUTHORIZATION = "Authorization"
HEADER_LOCATION = "Location"
HEADER_SIGNATURE = "X-Signature"
HEADER_SIGNATURE_KEY = "X-Signature-Key"
HEADER_API_KEY = "X-API-Key"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

# HTTP methods
METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"
METHOD_PATCH = "PATCH"
METHOD_DELETE = "DELETE"

DEFAULT_TIMEOUT = 30.0
