# 로깅 설정
# - 루트 로거에 콘솔 핸들러 1개만 붙입니다 (중복 설정 방지)
# - 각 모듈은 logging.getLogger(__name__)으로 로거를 가져다 씁니다

import logging


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if root.handlers:
        # 테스트에서 create_app을 여러 번 호출해도 핸들러가 쌓이지 않도록
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root.addHandler(handler)
