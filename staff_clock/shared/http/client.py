"""HTTPクライアント（リトライ機能付き）"""

from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions.errors import HTTPError, HTTPTimeoutError
from ..logging.config import get_logger

logger = get_logger(__name__)


class HTTPClient:
    """
    リトライ機能付きHTTPクライアント

    Features:
    - 5xx応答の自動リトライ（指数バックオフ）
    - リクエスト単位のタイムアウト指定
    - セッション管理

    タイムアウトはリトライしない。タイムアウト時の扱いは呼び出し側が決める。
    max_retries > 0 の場合、1回の get_json の所要時間は timeout を超えうる。
    """

    def __init__(
        self,
        timeout: float = 15.0,
        max_retries: int = 2,
        backoff_factor: float = 0.3,
        status_forcelist: tuple[int, ...] = (500, 502, 503, 504),
        user_agent: Optional[str] = None,
    ):
        """
        Args:
            timeout: デフォルトのリクエストタイムアウト（秒）
            max_retries: 5xx応答時の最大リトライ回数
            backoff_factor: バックオフ係数
            status_forcelist: リトライ対象のステータスコード
            user_agent: User-Agentヘッダー
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.status_forcelist = status_forcelist
        self.user_agent = user_agent or "Mozilla/5.0 (compatible; StaffClock/1.0)"

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()

        retry_strategy = Retry(
            total=self.max_retries,
            connect=0,
            read=0,
            backoff_factor=self.backoff_factor,
            status_forcelist=self.status_forcelist,
            allowed_methods=["HEAD", "GET"],
            raise_on_status=False,
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({"User-Agent": self.user_agent, "Accept": "application/json"})

        return session

    def get_json(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        GETリクエストを送り、JSONレスポンスを返す

        Args:
            url: リクエストURL
            params: クエリパラメータ
            timeout: このリクエストのタイムアウト（秒、Noneの場合はデフォルト）

        Returns:
            デコード済みのJSON

        Raises:
            HTTPTimeoutError: タイムアウトした場合
            HTTPError: リクエスト失敗時、またはJSONでない応答の場合
        """
        effective_timeout = self.timeout if timeout is None else timeout

        try:
            logger.debug(f"GET request to {url} (timeout={effective_timeout}s)")
            response = self.session.get(url, params=params, timeout=effective_timeout)
            response.raise_for_status()
            logger.debug(f"GET request successful: {url} (status={response.status_code})")
            return response.json()

        except requests.Timeout as e:
            logger.warning(f"GET request timed out: {url} after {effective_timeout}s")
            raise HTTPTimeoutError(f"Timed out after {effective_timeout}s: {url}") from e
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            logger.error(f"GET request failed: {url} - status={status_code}")
            raise HTTPError(f"Failed to GET {url}: {e}", status_code=status_code) from e
        except ValueError as e:
            logger.error(f"GET response is not JSON: {url}")
            raise HTTPError(f"Invalid JSON from {url}: {e}") from e
        except requests.RequestException as e:
            logger.error(f"GET request failed: {url} - {e}")
            raise HTTPError(f"Failed to GET {url}: {e}") from e

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
