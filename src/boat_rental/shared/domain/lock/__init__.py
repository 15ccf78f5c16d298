from .resource_lock import ResourceLock as ResourceLock
