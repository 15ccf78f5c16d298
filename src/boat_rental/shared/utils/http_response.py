import json

from pydantic import ValidationError

from boat_rental.shared.domain.result import Failure


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def failure_response(failure: Failure) -> dict:
    """Failure を HTTP ステータス付きのエラーレスポンスに変換する"""
    body: dict = {
        "status": "error",
        "error": failure.kind.value,
        "message": failure.message,
    }
    if failure.details:
        body["details"] = failure.details
    return api_response(failure.kind.http_status, body)


def invalid_request_response(error: ValidationError) -> dict:
    """リクエスト形式の不正（pydantic の ValidationError）を 400 に変換する"""
    return api_response(
        400,
        {
            "status": "error",
            "error": "VALIDATION_ERROR",
            "message": "Invalid request",
            "details": [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in error.errors()
            ],
        },
    )
