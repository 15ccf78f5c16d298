from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2


def get_caller_id(event: APIGatewayProxyEventV2) -> str | None:
    """JWT オーソライザーのクレーム (sub) から呼び出しユーザーIDを取り出す"""
    request_context = event.raw_event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    claims = (authorizer.get("jwt") or {}).get("claims") or {}
    return claims.get("sub")


def get_path_parameter(event: APIGatewayProxyEventV2, name: str) -> str | None:
    return (event.path_parameters or {}).get(name)
