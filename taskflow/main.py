# taskflow/main.py  (엔트리포인트: uvicorn taskflow.main:app)
from dotenv import load_dotenv

# .env 로딩은 설정 모듈이 import 되기 전에 한 번만
load_dotenv()

from taskflow.backend.main import app as app  # noqa: E402
