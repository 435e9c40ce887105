"""Validator for edge list and pair list DataFrames."""

import logging

import pandas as pd

from unionfind.error import EdgeListError

logger = logging.getLogger(__name__)


class EdgeValidator:
    """Validates weighted edge lists and unweighted pair lists."""

    # Required columns for weighted edge lists
    EDGE_COLUMNS = ["source", "target", "weight"]

    # Required columns for pair lists
    PAIR_COLUMNS = ["element_1", "element_2"]

    def __init__(
        self,
        edge_columns: list[str] | None = None,
        pair_columns: list[str] | None = None,
    ) -> None:
        self.edge_columns = edge_columns or list(self.EDGE_COLUMNS)
        self.pair_columns = pair_columns or list(self.PAIR_COLUMNS)

    def validate_edges(self, df: pd.DataFrame, source: str = "") -> pd.DataFrame:
        """Validate a weighted edge list DataFrame.

        Args:
            df: DataFrame to validate
            source: Source identifier for logging (e.g., file path)

        Returns:
            Validated DataFrame (same as input)

        Note:
            Validation errors are logged as warnings but do not stop processing.
            Empty DataFrame is valid (no edges case).
        """
        if len(df) == 0:
            return df

        source_info = f" ({source})" if source else ""

        missing_cols = [col for col in self.edge_columns if col not in df.columns]
        if missing_cols:
            logger.warning(f"edges missing required columns{source_info}: {missing_cols}")

        self._warn_missing_values(df, self.edge_columns, "edges", source_info)

        weight_col = self.edge_columns[2]
        if weight_col in df.columns:
            if not pd.api.types.is_numeric_dtype(df[weight_col]):
                logger.warning(f"edges column '{weight_col}' should be numeric{source_info}")
            else:
                negative = df[df[weight_col] < 0]
                if len(negative) > 0:
                    logger.warning(
                        f"edges has {len(negative)} rows with negative '{weight_col}'{source_info}"
                    )

        return df

    def validate_pairs(self, df: pd.DataFrame, source: str = "") -> pd.DataFrame:
        """Validate a pair list DataFrame.

        Args:
            df: DataFrame to validate
            source: Source identifier for logging (e.g., file path)

        Returns:
            Validated DataFrame (same as input)
        """
        if len(df) == 0:
            return df

        source_info = f" ({source})" if source else ""

        missing_cols = [col for col in self.pair_columns if col not in df.columns]
        if missing_cols:
            logger.warning(f"pairs missing required columns{source_info}: {missing_cols}")

        self._warn_missing_values(df, self.pair_columns, "pairs", source_info)

        self_loops = 0
        if all(col in df.columns for col in self.pair_columns):
            self_loops = int((df[self.pair_columns[0]] == df[self.pair_columns[1]]).sum())
        if self_loops:
            logger.warning(f"pairs has {self_loops} rows linking an element to itself{source_info}")

        return df

    @staticmethod
    def require_columns(df: pd.DataFrame, columns: list[str], kind: str) -> None:
        """Raise EdgeListError if any of columns is absent from df."""
        missing = [col for col in columns if col not in df.columns]
        if missing:
            raise EdgeListError(f"{kind} is missing required columns: {', '.join(missing)}")

    @staticmethod
    def _warn_missing_values(
        df: pd.DataFrame, columns: list[str], kind: str, source_info: str
    ) -> None:
        for col in columns:
            if col in df.columns and df[col].isna().any():
                missing_count = df[col].isna().sum()
                logger.warning(f"{kind} has {missing_count} missing values in '{col}'{source_info}")
