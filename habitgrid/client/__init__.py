from habitgrid.client.remote import RemoteBridge
from habitgrid.client.state import ViewState, next_status

__all__ = ["RemoteBridge", "ViewState", "next_status"]
