"""
NaaS HTTP API：租户与命名空间的增删改查。
- 统一错误响应格式：code, message, details, requestId；错误码到状态码的映射仅在本层完成。
- 响应头：X-Request-ID、X-Response-Time（毫秒）、CORS。
"""
import logging
import time
import uuid
from typing import Optional

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from naas.core.errors import (
    CODE_ALREADY_EXISTS,
    CODE_BAD_REQUEST,
    CODE_INTERNAL,
    CODE_NOT_FOUND,
    NaasError,
)
from naas.core.ids import create_id_generator
from naas.core.service import NamespaceService, TenantService, build_services

from .config import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, Settings

logger = logging.getLogger("naas.api")

STATUS_BY_CODE = {
    CODE_NOT_FOUND: 404,
    CODE_ALREADY_EXISTS: 409,
    CODE_BAD_REQUEST: 400,
    CODE_INTERNAL: 500,
}


def _request_id() -> str:
    return getattr(request, "request_id", "") or (request.headers.get("X-Request-ID") or "").strip()


def _error_response(code: str, message: str, details: str = "", status: Optional[int] = None):
    body = {"code": code, "message": message, "details": details, "requestId": _request_id()}
    return jsonify(body), status or STATUS_BY_CODE.get(code, 500)


def _http_error_response(exc: HTTPException):
    """框架层错误（未知路由、方法不允许等）同样返回统一 JSON 错误格式。"""
    status = exc.code or 500
    if status == 404:
        code = CODE_NOT_FOUND
    elif 400 <= status < 500:
        code = CODE_BAD_REQUEST
    else:
        code = CODE_INTERNAL
    resp, status = _error_response(code, exc.description or exc.name, "", status)
    valid_methods = getattr(exc, "valid_methods", None)
    if valid_methods:
        resp.headers["Allow"] = ", ".join(valid_methods)
    return resp, status


def _json_body() -> dict:
    """请求体必须为 JSON 对象；否则返回 None，由路由回 400。"""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else None


def create_app(
    tenant_service: Optional[TenantService] = None,
    namespace_service: Optional[NamespaceService] = None,
    settings: Optional[Settings] = None,
):
    """
    创建 NaaS Flask 应用。
    - tenant_service / namespace_service：须同时注入或同时省略；省略时按 settings.ID_STRATEGY 构造。
    - settings：未传入时读取环境变量。
    """
    if (tenant_service is None) != (namespace_service is None):
        raise ValueError("tenant_service 与 namespace_service 须同时注入或同时省略")
    settings = settings or Settings()
    if tenant_service is None:
        tenant_service, namespace_service = build_services(create_id_generator(settings.ID_STRATEGY))

    app = Flask(__name__)
    app.config["JSON_AS_ASCII"] = False
    app.json.ensure_ascii = False
    app.config["NAAS_SETTINGS"] = settings

    @app.before_request
    def before():
        request.request_id = (request.headers.get("X-Request-ID") or "").strip() or str(uuid.uuid4()).replace("-", "")[:32]
        request.start_time = time.perf_counter()

    @app.after_request
    def after(resp):
        resp.headers["X-Request-ID"] = getattr(request, "request_id", "")
        if getattr(request, "start_time", None) is not None:
            duration_ms = int((time.perf_counter() - request.start_time) * 1000)
            resp.headers["X-Response-Time"] = str(duration_ms)
            logger.debug("%s %s -> %s (%sms)", request.method, request.path, resp.status_code, duration_ms)
        allow_origin = settings.cors_origin_for(request.headers.get("Origin") or "")
        if allow_origin:
            resp.headers["Access-Control-Allow-Origin"] = allow_origin
            resp.headers["Access-Control-Allow-Methods"] = CORS_ALLOW_METHODS
            resp.headers["Access-Control-Allow-Headers"] = CORS_ALLOW_HEADERS
            if allow_origin != "*":
                resp.headers["Vary"] = "Origin"
        return resp

    @app.errorhandler(NaasError)
    def handle_naas_error(exc: NaasError):
        if STATUS_BY_CODE.get(exc.code, 500) >= 500:
            logger.error("request failed code=%s message=%s details=%s", exc.code, exc.message, exc.details)
        return _error_response(exc.code, exc.message, exc.details)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return _http_error_response(exc)
        logger.exception("unexpected error on %s %s", request.method, request.path)
        return _error_response(CODE_INTERNAL, "服务内部错误", "", 500)

    # ---------- 健康 ----------
    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "up", "service": "naas"}), 200

    # ---------- 租户 ----------
    @app.route("/tenants", methods=["POST"])
    def create_tenant():
        """创建租户。body: { "name": "JohnDoe" }"""
        body = _json_body()
        if body is None:
            return _error_response(CODE_BAD_REQUEST, "请求体必须为 JSON 对象")
        tenant = tenant_service.create_tenant(body.get("name"))
        return jsonify(tenant.to_dict()), 201

    @app.route("/tenants", methods=["GET"])
    def list_tenants():
        data = [t.to_dict() for t in tenant_service.list_tenants()]
        return jsonify({"data": data, "total": len(data)}), 200

    @app.route("/tenants/<tenant_id>", methods=["GET"])
    def get_tenant(tenant_id: str):
        return jsonify(tenant_service.get_tenant(tenant_id).to_dict()), 200

    @app.route("/tenants/<tenant_id>", methods=["PUT"])
    def update_tenant(tenant_id: str):
        """整体替换租户名称。body: { "name": "..." }"""
        body = _json_body()
        if body is None:
            return _error_response(CODE_BAD_REQUEST, "请求体必须为 JSON 对象")
        tenant = tenant_service.update_tenant(tenant_id, body.get("name"))
        return jsonify(tenant.to_dict()), 200

    @app.route("/tenants/<tenant_id>", methods=["DELETE"])
    def delete_tenant(tenant_id: str):
        tenant_service.delete_tenant(tenant_id)
        return Response(status=204)

    # ---------- 命名空间 ----------
    @app.route("/namespaces/<tenant_id>", methods=["POST"])
    def create_namespace(tenant_id: str):
        """在租户下创建命名空间。body: { "name": "ns1" }；租户不存在 404，重名 409。"""
        body = _json_body()
        if body is None:
            return _error_response(CODE_BAD_REQUEST, "请求体必须为 JSON 对象")
        ns = namespace_service.create_namespace(tenant_id, body.get("name"))
        return jsonify(ns.to_dict()), 201

    @app.route("/namespaces/all/<tenant_id>", methods=["GET"])
    def list_namespaces(tenant_id: str):
        data = [ns.to_dict() for ns in namespace_service.list_namespaces(tenant_id)]
        return jsonify({"data": data, "total": len(data)}), 200

    @app.route("/namespaces/<tenant_id>/<name>", methods=["GET"])
    def get_namespace(tenant_id: str, name: str):
        return jsonify(namespace_service.get_namespace(tenant_id, name).to_dict()), 200

    @app.route("/namespaces/<tenant_id>/<name>", methods=["PUT"])
    def update_namespace(tenant_id: str, name: str):
        """名称即键：body 可为空；若 body.name 与路径不一致返回 400。"""
        body = request.get_json(silent=True) if request.get_data() else {}
        if not isinstance(body, dict):
            return _error_response(CODE_BAD_REQUEST, "请求体必须为 JSON 对象")
        new_name = body.get("name")
        if new_name is not None and new_name != name:
            return _error_response(CODE_BAD_REQUEST, "不支持修改命名空间名称", f"name={name} newName={new_name}")
        ns = namespace_service.update_namespace(tenant_id, name)
        return jsonify(ns.to_dict()), 200

    @app.route("/namespaces/<tenant_id>/<name>", methods=["DELETE"])
    def delete_namespace(tenant_id: str, name: str):
        namespace_service.delete_namespace(tenant_id, name)
        return Response(status=204)

    return app


def main():
    """命令行入口：读取环境变量配置并启动服务。"""
    settings = Settings()
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.INFO))
    app = create_app(settings=settings)
    logger.info("naas listening on %s:%s id_strategy=%s", settings.HOST, settings.PORT, settings.ID_STRATEGY)
    app.run(host=settings.HOST, port=settings.PORT)


# 直接运行时的入口
if __name__ == "__main__":
    main()
