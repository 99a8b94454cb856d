import os


def _positive_int(name, default):
    raw = os.environ.get(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


AWS_REGION = os.environ.get('AWS_REGION', 'us-east-1')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# 이 너비 이하의 이미지는 리사이즈하지 않음
TARGET_WIDTH = _positive_int('TARGET_WIDTH', 300)

SOURCE_PREFIX = os.environ.get('SOURCE_PREFIX', 'original-images/')
DESTINATION_PREFIX = os.environ.get('DESTINATION_PREFIX', 'resized-images/')
RESIZED_MARKER = os.environ.get('RESIZED_MARKER', '_resized')
DEFAULT_CONTENT_TYPE = os.environ.get('DEFAULT_CONTENT_TYPE', 'image/jpeg')

if not RESIZED_MARKER:
    raise ValueError("RESIZED_MARKER must not be empty")
