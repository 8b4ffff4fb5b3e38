"""
Figma URL Parser
Figma 파일 URL 에서 file key 를 추출
"""

import re
from typing import Optional
from urllib.parse import unquote

# /file/<key> 또는 /design/<key>
_FILE_KEY_PATTERN = re.compile(r"/(?:file|design)/([a-zA-Z0-9]+)")


def parse_figma_file_key(url: str) -> Optional[str]:
    """
    https://www.figma.com/design/AbC123/Tokens?node-id=1-2 -> "AbC123"
    file key 가 없는 URL 이면 None
    """
    match = _FILE_KEY_PATTERN.search(unquote(url.strip()))
    return match.group(1) if match else None
