"""Leave Desk - employee leave-management backend."""
