"""
Figma REST API Client
스타일/변수 조회를 위한 Figma API 클라이언트
"""

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from flart.core.config import get_setting

settings = get_setting()


class FigmaApiClient:
    """Figma REST API 클라이언트"""

    def __init__(self, api_token: Optional[str] = None):
        self.api_token = (
            api_token or settings.FIGMA_API_TOKEN or os.getenv("FIGMA_API_TOKEN")
        )
        if not self.api_token:
            raise ValueError(
                "Figma API token is required. Set FIGMA_API_TOKEN environment variable or pass token directly."
            )
        self.base_url = settings.FIGMA_API_BASE_URL
        self.timeout = settings.FIGMA_API_TIMEOUT
        self.headers = {
            "X-Figma-Token": self.api_token,
            "Content-Type": "application/json",
        }

    def get_file(self, file_key: str, depth: int = 1) -> Optional[Dict[str, Any]]:
        url = f"{self.base_url}/files/{file_key}"
        try:
            response = requests.get(
                url,
                headers=self.headers,
                params={"depth": depth},
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logging.error(f"파일 가져오기 실패: {e}")
            return None

    def get_file_nodes(
        self, file_key: str, node_ids: List[str]
    ) -> Optional[Dict[str, Any]]:
        """
        스타일 노드 정의를 가져온다.

        Returns:
            노드 ID를 키로 하고 document 노드를 값으로 하는 딕셔너리
        """
        if not node_ids:
            return {}
        url = f"{self.base_url}/files/{file_key}/nodes"
        params = {"ids": ",".join(node_ids)}
        try:
            response = requests.get(
                url, headers=self.headers, params=params, timeout=self.timeout
            )
            response.raise_for_status()
            data = response.json()
            nodes: Dict[str, Any] = {}
            for node_id, node_data in (data.get("nodes") or {}).items():
                if node_data and "document" in node_data:
                    nodes[node_id] = node_data["document"]
            return nodes
        except requests.RequestException as e:
            logging.error(f"노드 가져오기 실패: {e}")
            return None

    def get_local_variables(self, file_key: str) -> Optional[Dict[str, Any]]:
        """
        로컬 변수/변수 컬렉션 조회 (GET /files/:key/variables/local)

        Returns:
            {"variables": {...}, "variableCollections": {...}} 또는 None
        """
        url = f"{self.base_url}/files/{file_key}/variables/local"
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            if response.status_code != 200:
                logging.error(f"변수 조회 실패 - 상태 코드: {response.status_code}")
                logging.error(f"응답 내용: {response.text}")
                return None
            data = response.json()
            return data.get("meta") or {}
        except requests.RequestException as e:
            logging.error(f"변수 조회 실패: {e}")
            return None
