"""User-facing error messages and response text for the backend."""

# Authentication messages
AUTH_INVALID_CREDENTIALS = "Invalid email or password"
AUTH_NO_TOKEN = "Unauthorized! No token provided"
AUTH_TOKEN_INVALID = "Token invalid or expired"
AUTH_USER_NOT_FOUND = "Invalid token: user no longer exists"
AUTH_INSUFFICIENT_ROLE = "Forbidden: insufficient role"
AUTH_LOGOUT_SUCCESS = "Logged out"

# Signup messages
REG_EMAIL_EXISTS = "Email is already registered"
REG_ADMIN_SIGNUP_DISABLED = "Admin accounts cannot be created through signup"
REG_SUCCESS = "User created successfully"

# Workshop messages
WORKSHOP_NOT_FOUND = "Workshop not found"
WORKSHOP_INSTRUCTOR_INVALID = "Assigned instructor must be an existing user with the instructor role"
WORKSHOP_DELETED = "Workshop deleted"

# Registration messages
REGISTRATION_NOT_FOUND = "Registration not found"
REGISTRATION_ALREADY_EXISTS = "You are already registered for this workshop"
REGISTRATION_WORKSHOP_FULL = "Workshop is full"
REGISTRATION_NOT_OWNER = "You can only cancel your own registrations"

# Attendance messages
ATTENDANCE_NOT_INSTRUCTOR = "Only the workshop's instructor or an admin can manage attendance"

# Feedback messages
FEEDBACK_FIELDS_REQUIRED = "Workshop and rating are both required"
FEEDBACK_RATING_RANGE = "Rating must be between 1 and 5"

# Material messages
MATERIAL_FIELDS_REQUIRED = "Workshop, title and file_url are required"

# Certificate messages
CERTIFICATE_NOT_FOUND = "Certificate not found"
CERTIFICATE_FIELDS_REQUIRED = "Workshop, userId and certificate_url are required"
CERTIFICATE_NOT_OWNER = "You can only download your own certificates"

# User messages
USER_NOT_FOUND = "User not found"

# Generic
INTERNAL_ERROR = "Internal server error"
INVALID_ID = "Invalid identifier"
