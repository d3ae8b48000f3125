"""
Google Sheets access for the episode spreadsheet.
"""
import os
import logging
from typing import Any, Dict, List, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .column_mapping import column_letter
from .exceptions import SheetsError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"


def a1_range(tab_name: str, cells: str) -> str:
    """Build an A1 range, quoting the tab name ("'c-ptsd recovery'!A:Z")"""
    escaped = tab_name.replace("'", "''")
    return f"'{escaped}'!{cells}"


class SheetsManager:
    """Sheets API manager for direct usage in services"""

    def __init__(self, spreadsheet_id: Optional[str] = None, service: Any = None):
        self.spreadsheet_id = spreadsheet_id or os.getenv("GOOGLE_SHEETS_SPREADSHEET_ID")
        self._service = service

    def _load_credentials(self):
        """Service account credentials from a key file or inline env vars"""
        credentials_file = os.getenv("GOOGLE_SERVICE_ACCOUNT_FILE")
        if credentials_file:
            return service_account.Credentials.from_service_account_file(
                credentials_file, scopes=SCOPES
            )

        client_email = os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL")
        private_key = os.getenv("GOOGLE_PRIVATE_KEY")
        if not client_email or not private_key:
            raise SheetsError(
                "Google service account credentials missing: set GOOGLE_SERVICE_ACCOUNT_FILE "
                "or GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY"
            )

        return service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "client_email": client_email,
                # Keys pasted into env files carry literal \n sequences
                "private_key": private_key.replace("\\n", "\n"),
                "token_uri": TOKEN_URI
            },
            scopes=SCOPES
        )

    @property
    def service(self):
        if self._service is None:
            if not self.spreadsheet_id:
                raise SheetsError("GOOGLE_SHEETS_SPREADSHEET_ID environment variable is required")
            try:
                credentials = self._load_credentials()
                self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
            except (GoogleAuthError, ValueError) as e:
                logger.error("Failed to initialize Google Sheets service: %s", e)
                raise SheetsError(f"Failed to initialize Google Sheets service: {e}")
            logger.info("Google Sheets service initialized successfully")
        return self._service

    def _execute(self, request, operation: str) -> Dict[str, Any]:
        try:
            return request.execute()
        except HttpError as e:
            logger.error("Google Sheets %s failed: %s", operation, e)
            raise SheetsError(f"Google Sheets {operation} failed: {e}", code=e.resp.status)
        except GoogleAuthError as e:
            logger.error("Google Sheets %s failed: %s", operation, e)
            raise SheetsError(f"Google Sheets {operation} failed: {e}", code=401)
        except (httplib2.HttpLib2Error, OSError) as e:
            # Host unreachable, DNS failure or socket timeout
            logger.error("Google Sheets %s failed: %s", operation, e)
            raise SheetsError(f"Google Sheets {operation} failed: {e}")

    def get_rows(self, range_: str) -> List[List[str]]:
        """Read a range as a 2D grid of cell strings (rows may be ragged)"""
        request = self.service.spreadsheets().values().get(
            spreadsheetId=self.spreadsheet_id,
            range=range_
        )
        response = self._execute(request, "read")
        return response.get("values", [])

    def update_cell(self, tab_name: str, row: int, column_index: int, value: str) -> Dict[str, Any]:
        """Write a single cell; row is 1-based, column_index zero-based"""
        range_ = a1_range(tab_name, f"{column_letter(column_index)}{row}")
        request = self.service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=range_,
            valueInputOption="RAW",
            body={"values": [[value]]}
        )
        return self._execute(request, "update")

    def describe(self) -> Dict[str, Any]:
        """Spreadsheet title and tabs"""
        request = self.service.spreadsheets().get(spreadsheetId=self.spreadsheet_id)
        response = self._execute(request, "metadata lookup")
        return {
            "title": response["properties"]["title"],
            "tabs": [
                {
                    "title": sheet["properties"]["title"],
                    "sheet_id": sheet["properties"]["sheetId"]
                } for sheet in response.get("sheets", [])
            ]
        }

    def test_connection(self) -> bool:
        self.describe()
        return True


# Global sheets manager instance, the API client is built on first use
sheets_manager = SheetsManager()
