# 3. correlate.py

from config import BIOMARKERS, TARGET
from preprocess import complete_cases

KEY_PAIRS = [('VO2max', TARGET), ('Sleep_Quality', TARGET)]


def correlation_matrix(df, columns=BIOMARKERS):
    """Pearson correlation over complete rows of `columns`."""
    data = complete_cases(df[list(columns)], columns)
    return data.corr(method='pearson')


def pair_correlation(df, x, y):
    mask = df[x].notna() & df[y].notna()
    return df.loc[mask, x].corr(df.loc[mask, y], method='pearson')


def key_correlations(df, pairs=KEY_PAIRS):
    return {f"{x}~{y}": pair_correlation(df, x, y) for x, y in pairs}
