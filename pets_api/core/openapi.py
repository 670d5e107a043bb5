# pets_api/core/openapi.py
"""
라우트 docstring의 YAML 블록과 marshmallow 스키마로부터 OpenAPI 문서를 생성합니다.

apispec의 FlaskPlugin이 URL 규칙을 OpenAPI 경로로 변환하고('/pets/<id>' -> '/pets/{id}'),
MarshmallowPlugin이 스키마 클래스를 components.schemas 로 등록합니다.
"""
import logging
from typing import Any, Dict

from flask import Flask
from apispec import APISpec
from apispec.ext.marshmallow import MarshmallowPlugin
from apispec_webframeworks.flask import FlaskPlugin

from pets_api.api.pets.schemas import PetSchema, PetUpdateSchema, ErrorResponseSchema

logger = logging.getLogger(__name__)

# 문서화 대상 블루프린트 이름
DOCUMENTED_BLUEPRINTS = ('pets_bp',)

PET_EXAMPLE = {
    '_id': 'XfgLrDDr5jQxyyqs',
    'type': 'dog',
    'name': 'Alexander',
}

def build_openapi_spec(app: Flask) -> Dict[str, Any]:
    """등록된 블루프린트의 뷰 함수들을 훑어 OpenAPI 문서(dict)를 만듭니다."""
    spec = APISpec(
        title=app.config['API_TITLE'],
        version=app.config['API_VERSION'],
        openapi_version=app.config['OPENAPI_VERSION'],
        info={'description': app.config['API_DESCRIPTION']},
        servers=[{
            'url': f"http://localhost:{app.config['PORT']}",
            'description': 'Local server',
        }],
        plugins=[FlaskPlugin(), MarshmallowPlugin()],
    )
    spec.tag({'name': 'Pets', 'description': 'The pets managing APIs'})

    spec.components.schema('Pet', schema=PetSchema, component={'example': PET_EXAMPLE})
    spec.components.schema('PetUpdate', schema=PetUpdateSchema)
    spec.components.schema('ErrorResponse', schema=ErrorResponseSchema)

    for endpoint, view in app.view_functions.items():
        if endpoint.split('.', 1)[0] in DOCUMENTED_BLUEPRINTS:
            spec.path(view=view, app=app)

    document = spec.to_dict()
    logger.info(f"OpenAPI document built with {len(document.get('paths', {}))} paths.")
    return document
