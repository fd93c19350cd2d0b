# 1. load_data.py

import pandas as pd

def load_data(filepath="athlete_biomarker_dataset.csv"):
    try:
        df = pd.read_csv(filepath, encoding="utf-8")
    except FileNotFoundError:
        print(f"[ERROR] File not found: {filepath}. Please check the path.")
        raise
    except Exception as e:
        print(f"[ERROR] An error occurred while loading data: {e}")
        raise
    print(f"[INFO] Loaded data with shape: {df.shape}")
    return df


def dataset_overview(df, n_values=5):
    """
    One row per column: dtype, non-null and null counts, and the first few values.
    """
    overview = pd.DataFrame({
        'Type': df.dtypes.astype(str),
        'Non-Null': df.notna().sum(),
        'Null': df.isna().sum(),
        'Values': [', '.join(str(v) for v in df[col].head(n_values)) for col in df.columns]
    })
    overview.index.name = 'Column'
    return overview
