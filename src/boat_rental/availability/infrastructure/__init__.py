from .dynamodb_availability_repository import (
    DynamoDBAvailabilityRepository as DynamoDBAvailabilityRepository,
)
