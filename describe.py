# 2. describe.py

import pandas as pd
from config import BIOMARKERS

SUMMARY_STATS = ['Min.', '1st Qu.', 'Median', 'Mean', '3rd Qu.', 'Max.']


def summarize(df, columns=BIOMARKERS):
    """
    Six-number summary per column, one row per column.

    Parameters:
        df (pd.DataFrame): Observation table.
        columns (list): Numeric columns to summarize. A missing column raises KeyError.

    Returns:
        pd.DataFrame: Indexed by column name with Min., 1st Qu., Median, Mean, 3rd Qu., Max.
    """
    data = df[list(columns)]
    quartiles = data.quantile([0.25, 0.5, 0.75])
    summary = pd.DataFrame({
        'Min.': data.min(),
        '1st Qu.': quartiles.loc[0.25],
        'Median': quartiles.loc[0.5],
        'Mean': data.mean(),
        '3rd Qu.': quartiles.loc[0.75],
        'Max.': data.max()
    }, columns=SUMMARY_STATS)
    return summary


def summarize_table(df):
    return summarize(df, df.select_dtypes(include='number').columns)
