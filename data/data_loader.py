#!/usr/bin/env python3
"""
Sales Data Loader Module for Price Elasticity Analysis.

This module provides a DataLoader class that turns tabular sales records into
Observation objects for the elasticity estimator.

PURPOSE:
- Standardize loading of sales data from CSV and Parquet files or an in-memory DataFrame
- Map differently named columns onto the expected schema
- Drop records that cannot be valid sales (non-positive price, negative quantity)

ASSUMPTIONS:
- Input contains product name, category, price, quantity sold and sale date
- Dates are parseable by pandas.to_datetime
- Data fits in memory

EDGE CASES:
- Missing required columns raise DataFormatError
- Unparseable dates raise DataValidationError
- Rows with missing values or invalid price/quantity are dropped with a warning
  (price must be positive, quantity a non-negative whole number)
- Empty datasets are allowed but produce a warning
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from utils.logging_utils import logger
from data.observations import Observation
from model.constants import DEFAULT_DATA_CONFIG
from model.exceptions import DataError, DataFormatError, DataValidationError

SUPPORTED_FORMATS = ('.csv', '.parquet')


class DataLoader:
    """
    Loader for historical sales records.

    Parameters
    ----------
    source : str, Path or pandas.DataFrame
        Path to a CSV or Parquet file, or a DataFrame already in memory.
    product_col, category_col, price_col, quantity_col, date_col : str
        Names of the columns holding each field.
    column_mapping : dict, optional
        Mapping from actual column names to the expected names above.
    """

    def __init__(
        self,
        source: Union[str, Path, pd.DataFrame],
        product_col: str = DEFAULT_DATA_CONFIG["product_col"],
        category_col: str = DEFAULT_DATA_CONFIG["category_col"],
        price_col: str = DEFAULT_DATA_CONFIG["price_col"],
        quantity_col: str = DEFAULT_DATA_CONFIG["quantity_col"],
        date_col: str = DEFAULT_DATA_CONFIG["date_col"],
        column_mapping: Optional[Dict[str, str]] = None
    ):
        self.product_col = product_col
        self.category_col = category_col
        self.price_col = price_col
        self.quantity_col = quantity_col
        self.date_col = date_col
        self.required_columns = [product_col, category_col, price_col, quantity_col, date_col]
        self.column_mapping = dict(column_mapping or {})

        if isinstance(source, pd.DataFrame):
            self.data_path = None
            self._frame = source
        else:
            self.data_path = Path(source)
            self._frame = None
            if not self.data_path.exists():
                raise DataError(f"Data file not found: {self.data_path}")
            if self.data_path.suffix.lower() not in SUPPORTED_FORMATS:
                raise DataFormatError(f"Unsupported file format: {self.data_path.suffix}")
            logger.info(f"Initialized DataLoader with data path: {self.data_path}")

    def _read(self) -> pd.DataFrame:
        if self._frame is not None:
            return self._frame.copy()
        if self.data_path.suffix.lower() == '.csv':
            return pd.read_csv(self.data_path)
        return pd.read_parquet(self.data_path)

    def _normalize_columns(self, data: pd.DataFrame) -> pd.DataFrame:
        rename = {actual: expected for actual, expected in self.column_mapping.items() if actual in data.columns}

        # Case-insensitive matches for anything still missing
        for col in data.columns:
            for required in self.required_columns:
                if col != required and col.lower() == required.lower() and required not in data.columns:
                    rename.setdefault(col, required)

        if rename:
            logger.info(f"Renaming columns: {rename}")
            data = data.rename(columns=rename)
        return data

    def load_data(self) -> pd.DataFrame:
        """
        Load, validate and clean the sales records.

        Returns
        -------
        pd.DataFrame
            Records with the required columns, dates parsed, invalid rows removed,
            in their original order.

        Raises
        ------
        DataFormatError
            If required columns are missing.
        DataValidationError
            If dates or numeric columns cannot be parsed.
        """
        data = self._normalize_columns(self._read())

        missing_cols = [col for col in self.required_columns if col not in data.columns]
        if missing_cols:
            raise DataFormatError(f"Missing required columns: {missing_cols}")

        data = data[self.required_columns]
        n_rows = len(data)
        data = data.dropna()
        if len(data) < n_rows:
            logger.warning(f"Dropped {n_rows - len(data)} rows with missing values")

        try:
            data = data.assign(**{
                self.date_col: pd.to_datetime(data[self.date_col]).dt.date,
                self.price_col: pd.to_numeric(data[self.price_col]).astype(float),
                self.quantity_col: pd.to_numeric(data[self.quantity_col]).astype(float),
            })
        except (ValueError, TypeError) as e:
            raise DataValidationError("Could not parse sales records", details=str(e)) from e

        quantities = data[self.quantity_col]
        valid = (data[self.price_col] > 0) & (quantities >= 0) & (quantities % 1 == 0)
        if not valid.all():
            logger.warning(
                f"Dropped {int((~valid).sum())} rows with non-positive price or a negative or fractional quantity"
            )
            data = data[valid]
        data = data.assign(**{self.quantity_col: data[self.quantity_col].astype(int)})

        if data.empty:
            logger.warning("No valid sales records loaded")

        logger.info(f"Loaded {len(data)} sales records for {data[self.product_col].nunique()} products")
        return data.reset_index(drop=True)

    def to_observations(self, data: Optional[pd.DataFrame] = None) -> List[Observation]:
        """
        Convert loaded records to Observation objects, preserving row order.

        Parameters
        ----------
        data : pd.DataFrame, optional
            Output of load_data. Loaded on demand if not given.
        """
        if data is None:
            data = self.load_data()

        return [
            Observation(
                product_name=str(row[0]),
                category=str(row[1]),
                price=float(row[2]),
                quantity=int(row[3]),
                sale_date=row[4],
            )
            for row in data[self.required_columns].itertuples(index=False, name=None)
        ]
