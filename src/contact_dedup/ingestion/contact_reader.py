"""
Contact spreadsheet reader for ContactDedup.

Loads contact rows from Excel (.xlsx/.xls) or CSV files with pandas and
converts each valid row into a ContactRecord.

Expected column order (the first row is a header and is skipped):
    0 - Contact ID (numeric)
    1 - First name
    2 - Last name
    3 - Email
    4 - Postal code
    5 - Address
"""

import logging
import math
import re
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from ..exceptions import ContactReadError
from ..match.models import ContactRecord

logger = logging.getLogger(__name__)

ID_COL = 0
GIVEN_NAME_COL = 1
SURNAME_COL = 2
EMAIL_COL = 3
ZIP_COL = 4
ADDRESS_COL = 5

EXCEL_EXTENSIONS = (".xlsx", ".xlsm", ".xls")
CSV_EXTENSIONS = (".csv",)

_ID_PATTERN = re.compile(r"\d+")


def cell_to_text(value: Any) -> str:
    """
    Render a spreadsheet cell as trimmed text.

    Missing cells become "", whole-number floats lose their ".0" suffix
    (Excel stores every number as a float) and booleans are lowercased.
    """
    if value is None:
        return ""

    if isinstance(value, bool):
        return str(value).lower()

    if isinstance(value, float):
        if pd.isna(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return str(value)

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ""

    return str(value).strip()


def id_cell_to_text(value: Any) -> str:
    """Render an id cell, truncating fractional numbers toward zero."""
    if isinstance(value, float) and math.isfinite(value):
        return str(int(value))
    return cell_to_text(value)


def parse_contact_id(raw_id: str) -> int:
    """Parse a contact id; anything but a plain run of digits becomes 0."""
    if _ID_PATTERN.fullmatch(raw_id):
        return int(raw_id)
    return 0


class ContactReader:
    """
    Reads contact records from a local spreadsheet.

    Rows with no id and no given name, surname or email are skipped.
    """

    def __init__(self, sheet: Union[int, str] = 0):
        """
        Initialize contact reader.

        Args:
            sheet: Excel sheet index or name (ignored for CSV files)
        """
        self.sheet = sheet
        logger.info(f"Initialized ContactReader (sheet={sheet})")

    def load_frame(self, file_path: str) -> pd.DataFrame:
        """
        Load the raw sheet, header row included, with every cell as-is.

        Args:
            file_path: Path to the source file

        Returns:
            DataFrame with positional columns
        """
        path = Path(file_path)
        suffix = path.suffix.lower()

        try:
            if suffix in EXCEL_EXTENSIONS:
                df = pd.read_excel(path, sheet_name=self.sheet, header=None, dtype=object)
            elif suffix in CSV_EXTENSIONS:
                df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False,
                                 skip_blank_lines=False)
            else:
                raise ContactReadError(f"Unsupported file format: {file_path}",
                                       {"path": file_path, "suffix": suffix})
        except ContactReadError:
            raise
        except Exception as e:
            logger.error(f"Error reading contact file {file_path}: {e}")
            raise ContactReadError(f"Failed to read contact file {file_path}: {e}",
                                   {"path": file_path}) from e

        logger.info(f"Loaded {len(df)} rows from {file_path}")
        return df

    def _cell(self, row: pd.Series, col: int) -> str:
        if col >= len(row):
            return ""
        return cell_to_text(row.iloc[col])

    def row_to_contact(self, row: pd.Series, position: int) -> Optional[ContactRecord]:
        """
        Convert a raw row into a ContactRecord.

        Args:
            row: Raw row with positional cells
            position: 1-based spreadsheet row number

        Returns:
            ContactRecord, or None if the row is blank or incomplete
        """
        raw_id = id_cell_to_text(row.iloc[ID_COL]) if len(row) > ID_COL else ""
        contact_id = parse_contact_id(raw_id)

        given_name = self._cell(row, GIVEN_NAME_COL)
        surname = self._cell(row, SURNAME_COL)
        email = self._cell(row, EMAIL_COL)

        if contact_id == 0 and not given_name and not surname and not email:
            logger.warning(f"Skipping blank or incomplete row {position}")
            return None

        contact = ContactRecord(
            contact_id=contact_id,
            given_name=given_name,
            surname=surname,
            email=email,
            postal_code=self._cell(row, ZIP_COL),
            address=self._cell(row, ADDRESS_COL),
            source_position=position,
        )

        logger.debug(f"Parsed contact: [ID={raw_id}, Name={given_name} {surname}, "
                     f"Email={email}, Zip={contact.postal_code}, Addr={contact.address}]")
        return contact

    def read_contacts(self, file_path: str) -> List[ContactRecord]:
        """
        Read all valid contacts from a spreadsheet.

        Args:
            file_path: Path to the source file

        Returns:
            Contacts in sheet order
        """
        df = self.load_frame(file_path)

        contacts = []
        # Row 0 is the header; spreadsheet rows are 1-based
        for index in range(1, len(df)):
            contact = self.row_to_contact(df.iloc[index], index + 1)
            if contact is not None:
                contacts.append(contact)

        logger.info(f"Read {len(contacts)} contacts from {file_path}")
        return contacts


def read_contacts(file_path: str, sheet: Union[int, str] = 0) -> List[ContactRecord]:
    """
    Convenience function to read contacts from a spreadsheet.

    Args:
        file_path: Path to the source file
        sheet: Excel sheet index or name

    Returns:
        List of contact records
    """
    reader = ContactReader(sheet)
    return reader.read_contacts(file_path)
