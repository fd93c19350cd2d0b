# 9. app.py

import os
from config import PipelineConfig, BIOMARKERS, PREDICTORS
from load_data import load_data, dataset_overview
from describe import summarize
from correlate import correlation_matrix, key_correlations
from regression import fit_recovery_model, summarize_model, residual_diagnostics
from preprocess import complete_cases, scale_features
from cluster import elbow_curve, train_kmeans, cluster_centers, assign_clusters, cluster_profiles
from export_data import export_data
import visualize


def _figure_path(config, name):
    if config.figures_dir is None:
        return None
    os.makedirs(config.figures_dir, exist_ok=True)
    return os.path.join(config.figures_dir, name)


def run_pipeline(config=None):
    """Load, describe, correlate, regress, cluster, plot and export. Returns every artifact."""
    config = config or PipelineConfig()

    df = load_data(config.data_path)
    overview = dataset_overview(df)
    print(overview)

    summary = summarize(df, BIOMARKERS)
    print(summary)

    corr = correlation_matrix(df, BIOMARKERS)
    key_corr = key_correlations(df)
    for pair, value in key_corr.items():
        print(f"[INFO] Correlation {pair}: {value:.3f}")
    visualize.plot_correlation_heatmap(corr, save_path=_figure_path(config, 'correlation_heatmap.png'))

    results = fit_recovery_model(df)
    coefficients, model_stats = summarize_model(results)
    print(coefficients)
    diagnostics = residual_diagnostics(results)
    visualize.plot_regression_diagnostics(diagnostics, save_path=_figure_path(config, 'regression_diagnostics.png'))

    features = complete_cases(df, PREDICTORS)
    X_scaled, _ = scale_features(features, PREDICTORS)
    elbow = elbow_curve(X_scaled, k_max=config.elbow_k_max,
                        random_state=config.random_state, n_init=config.n_init)
    visualize.plot_elbow(elbow, save_path=_figure_path(config, 'elbow.png'))

    model, labels, score = train_kmeans(X_scaled, k=config.n_clusters, n_init=config.n_init,
                                        random_state=config.random_state, max_iter=config.max_iter)
    clustered = assign_clusters(df, labels, features.index)
    profiles = cluster_profiles(clustered)
    print(profiles)
    visualize.plot_clusters(X_scaled, labels, save_path=_figure_path(config, 'clusters_pca.png'))

    visualize.plot_pairwise(clustered, save_path=_figure_path(config, 'pairwise.png'))
    visualize.plot_vo2max_recovery(clustered, save_path=_figure_path(config, 'vo2max_recovery.png'))

    output_path = export_data(clustered, config.output_path)

    return {
        'data': clustered,
        'overview': overview,
        'summary': summary,
        'correlation': corr,
        'key_correlations': key_corr,
        'model': results,
        'coefficients': coefficients,
        'model_stats': model_stats,
        'diagnostics': diagnostics,
        'elbow': elbow,
        'kmeans': model,
        'silhouette': score,
        'centers': cluster_centers(model, PREDICTORS),
        'profiles': profiles,
        'output_path': output_path
    }


if __name__ == "__main__":
    run_pipeline(PipelineConfig())
