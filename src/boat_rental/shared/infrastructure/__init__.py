from .dynamodb import from_storage_iso as from_storage_iso
from .dynamodb import is_conditional_check_failure as is_conditional_check_failure
from .dynamodb import query_all as query_all
from .dynamodb import resolve_table as resolve_table
from .dynamodb import to_storage_iso as to_storage_iso
from .dynamodb_resource_lock import DynamoDBResourceLock as DynamoDBResourceLock
from .in_memory_resource_lock import InMemoryResourceLock as InMemoryResourceLock
from .dynamodb_lookups import DynamoDBResourceLookup as DynamoDBResourceLookup
from .dynamodb_lookups import DynamoDBUserLookup as DynamoDBUserLookup
