from projecthub.enums import ProjectRole

# Roles allowed to change a task's status
TASK_EDITOR_ROLES = [ProjectRole.MANAGER.value, ProjectRole.SCRUM_MASTER.value]

# Upload rules
ALLOWED_UPLOAD_EXTENSIONS = [
    ".pdf",
    ".txt",
    ".py",
    ".java",
    ".c",
    ".cpp",
    ".doc",
    ".docx",
    ".ppt",
    ".pptx",
]

# Listing limits
USER_SEARCH_LIMIT = 10
NOTIFICATION_LIMIT = 20
DASHBOARD_CHAT_LIMIT = 50
RECENT_ACTIVITY_LIMIT = 5
HOURS_PER_COMPLETED_TASK = 2

class ErrorMessages:
    PROJECT_NOT_FOUND = "Project not found"
    TASK_NOT_FOUND = "Task not found"
    MANAGER_NOT_FOUND = "Manager email not found"
    INVITE_NOT_FOUND = "Invite not found"
    NOTIFICATION_NOT_FOUND = "Notification not found"

    # Auth
    INVALID_CREDENTIALS = "Invalid credentials"
    NO_TOKEN = "No token provided"
    INVALID_TOKEN = "Invalid token"
    USER_EXISTS = "User already exists"

    # Permissions
    ACCESS_DENIED = "Access denied"
    NOT_PROJECT_MEMBER = "Not a project member"
    ONLY_INVITED_MANAGER = "Only the invited manager can respond to this invite"
    ONLY_MANAGER = "Only manager allowed"
    ONLY_OWNER_DELETE = "Only owner can delete project"
    ONLY_OWNER_OR_MANAGER = "Only owner or manager allowed"
    ONLY_TASK_EDITORS = "Only Manager or Scrum Master can update tasks"

    # Invites
    INVITE_ALREADY_REJECTED = "Project invite was already rejected"
    INVITE_ALREADY_ACCEPTED = "Project invite was already accepted"

    # Input
    MESSAGE_REQUIRED = "Message is required"
    NO_FILE = "No file uploaded"
    FILE_TYPE_NOT_ALLOWED = "File type not allowed"

class SuccessMessages:
    SIGNUP = "Signup successful"
    PROJECT_CREATED = "Project created & manager invited"
    PROJECT_ACCEPTED = "Project accepted"
    PROJECT_REJECTED = "Project rejected"
    PROJECT_DELETED = "Project deleted successfully"
    SETUP_COMPLETED = "Manager setup completed"
    TEAM_ACCEPTED = "Team member accepted"
    TEAM_REJECTED = "Team invite rejected"
    TASK_UPDATED = "Task updated successfully"
    UPLOAD_SUCCESSFUL = "Upload successful"
    NOTIFICATION_READ = "Notification marked as read"
