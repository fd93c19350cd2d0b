"""
End-to-end run of the biomarker pipeline on a synthetic dataset
"""
import numpy as np
import pandas as pd
import pytest
from app import run_pipeline
from config import PipelineConfig, BIOMARKERS, PREDICTORS, CLUSTER_COLUMN


@pytest.fixture
def config(tmp_path, biomarker_csv):
    return PipelineConfig(
        data_path=str(biomarker_csv),
        output_path=str(tmp_path / "processed_athlete_biomarker_dataset.csv"),
        figures_dir=str(tmp_path / "figures"),
    )


class TestRunPipeline:

    def test_writes_clustered_csv(self, config, biomarker_df):
        artifacts = run_pipeline(config)

        written = pd.read_csv(artifacts['output_path'])
        assert len(written) == len(biomarker_df)
        assert list(written.columns) == list(biomarker_df.columns) + [CLUSTER_COLUMN]
        assert set(written[CLUSTER_COLUMN]) == {1, 2, 3}

    def test_renders_every_figure(self, config, tmp_path):
        run_pipeline(config)
        saved = sorted(p.name for p in (tmp_path / "figures").iterdir())
        assert saved == sorted([
            'correlation_heatmap.png', 'regression_diagnostics.png', 'elbow.png',
            'clusters_pca.png', 'pairwise.png', 'vo2max_recovery.png',
        ])

    def test_artifacts(self, config):
        artifacts = run_pipeline(config)

        assert list(artifacts['summary'].index) == BIOMARKERS
        assert artifacts['correlation'].shape == (6, 6)
        assert 0 <= artifacts['model_stats']['r_squared'] <= 1
        assert list(artifacts['elbow']['k']) == list(range(1, 11))
        assert list(artifacts['centers'].columns) == PREDICTORS
        assert artifacts['profiles']['Num_Athletes'].sum() == 60

    def test_reproducible(self, config):
        first = run_pipeline(config)['data'][CLUSTER_COLUMN]
        second = run_pipeline(config)['data'][CLUSTER_COLUMN]
        pd.testing.assert_series_equal(first, second)

    def test_incomplete_row_kept_without_label(self, tmp_path, biomarker_df):
        biomarker_df.loc[10, 'Sleep_Quality'] = np.nan
        data_path = tmp_path / "with_gap.csv"
        biomarker_df.to_csv(data_path, index=False)
        config = PipelineConfig(data_path=str(data_path),
                                output_path=str(tmp_path / "out.csv"),
                                figures_dir=str(tmp_path / "figures"))

        artifacts = run_pipeline(config)

        assert len(artifacts['data']) == len(biomarker_df)
        assert pd.isna(artifacts['data'].loc[10, CLUSTER_COLUMN])
        assert artifacts['model_stats']['n_obs'] == len(biomarker_df) - 1

    def test_missing_input_is_fatal(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run_pipeline(PipelineConfig(data_path=str(tmp_path / "missing.csv")))
