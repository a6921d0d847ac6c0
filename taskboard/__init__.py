"""taskboard: task-management REST API with JWT auth and user/admin roles."""
