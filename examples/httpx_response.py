import httpx

from cachelex import ContentLengthError, content_length, extract_cache_control_directive
from cachelex.httpx import to_header_list

with httpx.Client() as client:
    response = client.get("https://www.example.com")

headers = to_header_list(response)

for field_value in headers.get_all("Cache-Control"):
    print("max-age:", extract_cache_control_directive(field_value, "max-age"))

try:
    print("Content-Length:", content_length(headers))
except ContentLengthError as exc:
    print("Refusing to trust the response framing:", exc)
