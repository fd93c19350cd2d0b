# 0. config.py

from dataclasses import dataclass
from typing import Optional

PREDICTORS = ['VO2max', 'Blood_Lactate', 'Haematocrit', 'HR_Recovery', 'Sleep_Quality']
TARGET = 'Recovery_Time'
BIOMARKERS = PREDICTORS + [TARGET]
CLUSTER_COLUMN = 'Cluster'


@dataclass
class PipelineConfig:
    """
    Settings for one run of the biomarker pipeline.

    figures_dir: directory to save plots into. If None, plots are displayed.
    """
    data_path: str = "athlete_biomarker_dataset.csv"
    output_path: str = "processed_athlete_biomarker_dataset.csv"
    figures_dir: Optional[str] = None
    n_clusters: int = 3
    n_init: int = 25
    random_state: int = 123
    max_iter: int = 300
    elbow_k_max: int = 10
