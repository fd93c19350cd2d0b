"""
Pytest configuration and fixtures

Synthetic athlete tables with three well separated physiological profiles.
Plots render on the Agg backend so no display is needed.
"""
import os
import sys

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

# Add the parent directory to the path so we can import the pipeline modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

PROFILES = {
    'elite': {'VO2max': 65, 'Blood_Lactate': 2.0, 'Haematocrit': 46, 'HR_Recovery': 40, 'Sleep_Quality': 8.0},
    'trained': {'VO2max': 50, 'Blood_Lactate': 4.0, 'Haematocrit': 43, 'HR_Recovery': 30, 'Sleep_Quality': 6.0},
    'recreational': {'VO2max': 38, 'Blood_Lactate': 7.0, 'Haematocrit': 40, 'HR_Recovery': 20, 'Sleep_Quality': 4.0},
}
SPREAD = {'VO2max': 2.5, 'Blood_Lactate': 0.4, 'Haematocrit': 0.8, 'HR_Recovery': 2.5, 'Sleep_Quality': 0.5}


def make_biomarker_frame(per_group=20, seed=7):
    rng = np.random.default_rng(seed)
    rows = []
    for group, centre in PROFILES.items():
        for i in range(per_group):
            row = {'Athlete_ID': f"{group[:3].upper()}-{i:02d}", 'Group': group}
            for col, mean in centre.items():
                row[col] = round(rng.normal(mean, SPREAD[col]), 2)
            rows.append(row)
    df = pd.DataFrame(rows)
    noise = rng.normal(0, 2.0, len(df))
    df['Recovery_Time'] = (60 - 0.4 * df['VO2max'] + 2.0 * df['Blood_Lactate'] + 0.1 * df['Haematocrit']
                           - 0.2 * df['HR_Recovery'] - 1.5 * df['Sleep_Quality'] + noise).round(2)
    return df


@pytest.fixture
def biomarker_df():
    return make_biomarker_frame()


@pytest.fixture
def biomarker_csv(tmp_path, biomarker_df):
    path = tmp_path / "athlete_biomarker_dataset.csv"
    biomarker_df.to_csv(path, index=False)
    return path


@pytest.fixture
def two_group_points():
    """Ten points: five near the origin, five near (10, ..., 10)."""
    rng = np.random.default_rng(0)
    near = rng.normal(0, 0.5, size=(5, 5))
    far = rng.normal(10, 0.5, size=(5, 5))
    return np.vstack([near, far])
