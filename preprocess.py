# 5. preprocess.py

from sklearn.preprocessing import StandardScaler
from config import PREDICTORS


def require_columns(df, columns):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise ValueError(f"[ERROR] Missing required features: {missing}")


def complete_cases(df, columns):
    # rows with a missing value in any of `columns` are excluded; index is kept
    return df.dropna(subset=list(columns))


def scale_features(df, columns=PREDICTORS):
    require_columns(df, columns)
    scaler = StandardScaler()
    X_scaled = scaler.fit_transform(df[list(columns)])
    return X_scaled, scaler
