"""User-facing messages, kept in one place so services, codec and tests agree."""

# Computers
COMPUTER_NOT_FOUND = "Computer not found"
MAKER_NOT_FOUND = "Maker '{maker}' not found"
COMPUTER_NOT_FOUND_FOR_MAKER_AND_MODEL = (
    "Computer not found for maker '{maker}' and model '{model}'"
)
COMPUTER_ALREADY_EXISTS = "Computer already exists"
MODEL_PARAMETER_REQUIRED = "Model parameter required"

# SSH keys
SSH_KEY_NOT_FOUND = "SSH key not found"
SSH_KEY_ALREADY_EXISTS = "SSH key already exists"
SSH_KEY_INVALID_RSA = "The content of the public key is invalid for the type 'ssh-rsa'"
SSH_KEY_INVALID_ED25519 = "The content of the public key is invalid for the type 'ed25519'"

# Validation
VALIDATION_FAILED = "Validation failed"
VALIDATION_TYPE_REQUIRED = "Type is required"
VALIDATION_MAKER_REQUIRED = "Maker is required"
VALIDATION_MODEL_REQUIRED = "Model is required"
VALIDATION_SSH_KEY_REQUIRED = "SSH key is required"
VALIDATION_SSH_KEY_TYPE_REQUIRED = "SSH key type is required"
VALIDATION_SSH_KEY_TYPE_INVALID = "SSH key type must be one of: ssh-rsa, ssh-ed25519"
VALIDATION_PUBLIC_KEY_REQUIRED = "Public key is required"
VALIDATION_BODY_REQUIRED = "Request body is required"
VALIDATION_BODY_NOT_OBJECT = "Request body must be an object"
MALFORMED_JSON = "Malformed JSON request body"
MALFORMED_XML = "Malformed XML request body"
XML_ROOT_NOT_COMPUTER = "XML root element must be <computer>"

# Infrastructure
INTERNAL_ERROR = "An unexpected error occurred"
REQUEST_TIMED_OUT = "Request timed out"
