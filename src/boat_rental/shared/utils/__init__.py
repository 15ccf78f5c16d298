from .http_response import api_response as api_response
from .http_response import failure_response as failure_response
from .http_response import invalid_request_response as invalid_request_response
from .request_context import get_caller_id as get_caller_id
from .request_context import get_path_parameter as get_path_parameter
from .validators import to_decimal as to_decimal
