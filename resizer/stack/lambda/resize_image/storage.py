from contextlib import closing


def download(s3, bucket, key):
    """Fetch the whole object into memory. Returns ``(body, content_type)``.

    The streaming body is always closed, even when the read fails. Nothing
    bounds the size of the object except the memory the function runs with.
    """
    response = s3.get_object(Bucket=bucket, Key=key)
    with closing(response['Body']) as stream:
        body = stream.read()
    return body, response.get('ContentType')


def upload(s3, bucket, key, data, content_type):
    s3.put_object(
        Bucket=bucket,
        Key=key,
        Body=data,
        ContentType=content_type
    )
