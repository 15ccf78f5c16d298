from .resource_lookup import Resource as Resource
from .resource_lookup import ResourceLookup as ResourceLookup
from .user_lookup import User as User
from .user_lookup import UserLookup as UserLookup
