from typing import Any, Dict, List, Optional, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def respond_with_json(
    payload: Optional[Union[Dict[str, Any], List[Any]]],
    status_code: int = 200,
) -> JSONResponse:
    """
    创建JSON响应

    参数:
        payload: 响应数据
        status_code: HTTP状态码，默认200

    返回:
        JSONResponse: Content-Type 为 application/json 的响应
    """
    return JSONResponse(content=jsonable_encoder(payload), status_code=status_code)


def error_body(msg: str) -> Dict[str, str]:
    """错误响应体 {"error": msg}"""
    return {"error": msg}


def respond_with_error(msg: str, status_code: int = 400) -> JSONResponse:
    """
    创建错误响应

    参数:
        msg: 错误消息
        status_code: HTTP状态码，默认400表示客户端错误

    返回:
        JSONResponse: 响应体为 {"error": msg}
    """
    return respond_with_json(error_body(msg), status_code=status_code)


def success_response() -> Dict[str, str]:
    """删除等无返回数据操作的成功响应体"""
    return {"result": "success"}
