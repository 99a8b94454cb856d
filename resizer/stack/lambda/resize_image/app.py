import json
import logging
import urllib.parse

import boto3

import processor
import settings
import storage
from keys import is_processed, resized_key_for

logger = logging.getLogger()
logger.setLevel(settings.LOG_LEVEL)

s3 = boto3.client('s3', region_name=settings.AWS_REGION)

json_headers = {
    "Content-Type": "application/json"
}


def _response(status_code, payload):
    return {
        "statusCode": status_code,
        "body": json.dumps(payload),
        "headers": dict(json_headers)
    }


def _field(obj, *path):
    for name in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(name)
    return obj


def _extract_bucket_and_key(event):
    """Return ``(bucket, raw_key)``. The key is still plus/percent encoded."""
    if not isinstance(event, dict):
        return None, None

    # Direct S3 notification
    records = event.get('Records')
    if isinstance(records, list) and records:
        if len(records) > 1:
            logger.warning("Only the first of %d records is processed, %d ignored", len(records), len(records) - 1)
        return _field(records[0], 's3', 'bucket', 'name'), _field(records[0], 's3', 'object', 'key')

    # EventBridge (S3 -> EventBridge)
    detail = event.get('detail')
    if detail:
        return _field(detail, 'bucket', 'name'), _field(detail, 'object', 'key')

    # Manual/test invoke payloads
    return event.get('bucket'), event.get('key')


def _decode_key(raw_key):
    """Plus/percent decode ``raw_key``; None when it is not a string or not valid UTF-8."""
    if not isinstance(raw_key, str):
        return None
    try:
        return urllib.parse.unquote_plus(raw_key, errors='strict')
    except UnicodeDecodeError:
        return None


def _image_width(metadata):
    if not metadata:
        return None
    try:
        width = int(metadata.get('width'))
    except (TypeError, ValueError):
        return None
    return width or None


def lambda_handler(event, context):
    bucket, raw_key = _extract_bucket_and_key(event)
    key = _decode_key(raw_key)

    if key is None or not key.strip():
        logger.error("S3 Key %s is undefined.", raw_key)
        return _response(400, {"error": f"S3 Key {raw_key} is undefined."})

    # 리사이즈 결과물이 다시 이 함수를 트리거하는 것을 방지
    if is_processed(key, settings.RESIZED_MARKER):
        logger.info("Skipping already processed image s3://%s/%s", bucket, key)
        return _response(204, {"message": "Image is already processed. Exiting."})

    try:
        logger.info("Processing file: s3://%s/%s", bucket, key)
        body, content_type = storage.download(s3, bucket, key)

        width = _image_width(processor.read_metadata(body))
        if width is None:
            logger.info("Image is lacking necessary metadata")
            return _response(400, {"message": "Image is lacking necessary metadata"})

        if width <= settings.TARGET_WIDTH:
            logger.info("Image is already the proper size.")
            return _response(400, {"message": "Image is already the proper size."})

        resized = processor.resize_to_width(body, settings.TARGET_WIDTH)

        resized_key = resized_key_for(
            key,
            settings.SOURCE_PREFIX,
            settings.DESTINATION_PREFIX,
            settings.RESIZED_MARKER
        )
        storage.upload(s3, bucket, resized_key, resized, content_type or settings.DEFAULT_CONTENT_TYPE)

        message = f"Resized Image {resized_key} has been uploaded"
        logger.info(message)
        return _response(200, {"message": message})

    except Exception:
        logger.exception("Error processing image s3://%s/%s", bucket, key)
        return _response(500, {"error": "Internal Server Error"})
