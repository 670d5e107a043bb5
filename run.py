# run.py
from dotenv import load_dotenv
import os
import atexit

basedir = os.path.abspath(os.path.dirname(__file__))
# 이 파일과 같은 디렉터리에 있는 '.env' 파일을 설정보다 먼저 로드합니다.
load_dotenv(dotenv_path=os.path.join(basedir, '.env'))

from pets_api import create_app

app = create_app()
# 프로세스 종료 시 저장소 파일 핸들을 닫습니다.
atexit.register(app.services['store'].close)

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    debug = app.config.get('DEBUG', False)
    print(f"Server is running on PORT: {port}")
    app.run(host=host, port=port, debug=debug)
