from leavedesk.store import LeaveStore


class BaseService:
    """
    Common base for services that operate on the shared LeaveStore.
    Services raise AppException subclasses and leave logging to the caller.
    """

    def __init__(self, store: LeaveStore):
        self.store = store
