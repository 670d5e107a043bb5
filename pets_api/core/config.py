# pets_api/core/config.py

import os # 'os' 모듈: 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 서버가 바인딩할 호스트와 포트. PORT가 없으면 3000번을 사용합니다.
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3000))

    # TinyDB가 관리하는 JSON 파일 경로. 파일 포맷은 TinyDB가 전적으로 소유합니다.
    DATABASE_PATH = os.getenv('DATABASE_PATH', 'pets.db.json')
    DATABASE_IN_MEMORY = False

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # /api-docs 에서 노출되는 OpenAPI 문서 메타데이터
    API_TITLE = 'Pets API'
    API_VERSION = '1.0.0'
    API_DESCRIPTION = 'A simple Flask Pets API'
    OPENAPI_VERSION = '3.0.0'
    SWAGGER_UI_CDN = 'https://cdn.jsdelivr.net/npm/swagger-ui-dist@5'

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    # 테스트는 디스크를 건드리지 않도록 메모리 저장소를 사용합니다.
    DATABASE_IN_MEMORY = True

class ProductionConfig(Config):
    """운영 환경을 위한 설정 클래스입니다."""
    DEBUG = False

# config_by_name: FLASK_ENV 값에 따라 create_app에서 설정 클래스를 선택하는 데 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
