# pets_api/__init__.py

# =====================================================================================
# 1. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import time
import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, g
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정
from pets_api.core.config import config_by_name
from pets_api.core.openapi import build_openapi_spec

# - API 블루프린트
from pets_api.api.pets.routes import pets_bp
from pets_api.api.docs.routes import docs_bp

# - 서비스 모듈
from pets_api.services.document_store import DocumentStore
from pets_api.api.pets.services import PetService

logger = logging.getLogger(__name__)

def create_app(config_name: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development', 'testing', 'production' 중 하나. 없으면 FLASK_ENV를 사용합니다.
    :param overrides: 설정 클래스 위에 덮어쓸 값들 (테스트에서 DATABASE_PATH 지정 등)
    """
    # =====================================================================================
    # 2. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"알 수 없는 설정 이름입니다: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    if overrides:
        app.config.update(overrides)
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    )

    # =====================================================================================
    # 3. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 3-1. 프로세스 전체에서 공유되는 문서 저장소는 단 한 번만 생성
    try:
        store = DocumentStore()
        store.init_app(app)
        app.services['store'] = store
        logger.info("Document store initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize document store: {e}")
        raise

    # 3-2. 저장소를 주입받는 도메인 서비스
    app.services['pets'] = PetService(store=app.services['store'])

    # =====================================================================================
    # 4. 블루프린트 등록 및 API 문서 생성
    # =====================================================================================
    app.register_blueprint(pets_bp, url_prefix='/pets')
    app.register_blueprint(docs_bp, url_prefix='/api-docs')

    app.extensions['openapi'] = build_openapi_spec(app)

    # =====================================================================================
    # 5. 요청 로깅 (METHOD path status duration)
    # =====================================================================================
    @app.before_request
    def _start_timer():
        g._request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        started = getattr(g, '_request_started', None)
        duration_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info(f"{request.method} {request.path} {response.status_code} {duration_ms:.3f} ms")
        return response

    # =====================================================================================
    # 6. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 404/405 등 HTTP 예외는 그대로 돌려보냅니다.
        if isinstance(err, HTTPException):
            return err
        logger.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "An unexpected server error occurred."}
        return jsonify(response), 500

    logger.info(f"Flask app created for '{config_name}' environment.")

    return app
