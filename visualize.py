# 7. visualize.py

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
import statsmodels.api as sm
from sklearn.decomposition import PCA
import pandas as pd
from config import BIOMARKERS, CLUSTER_COLUMN, TARGET


def _finish(fig, save_path=None):
    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        plt.close(fig)
        print(f"[INFO] Plot saved to: {save_path}")
    else:
        plt.show()


def _with_cluster_hue(df):
    # categorical string labels give a discrete palette and legend
    data = df.dropna(subset=[CLUSTER_COLUMN]).copy()
    data[CLUSTER_COLUMN] = data[CLUSTER_COLUMN].astype(int).astype(str).astype('category')
    return data


def plot_correlation_heatmap(corr, save_path=None):
    """
    Colour-coded correlation matrix, upper triangle and diagonal only.

    Parameters:
        corr (pd.DataFrame): Square correlation matrix.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    mask = np.tril(np.ones_like(corr, dtype=bool), k=-1)
    fig, ax = plt.subplots(figsize=(8, 6))
    sns.heatmap(corr, mask=mask, annot=True, fmt='.2f', cmap='RdBu_r',
                vmin=-1, vmax=1, square=True, linewidths=0.5, ax=ax)
    ax.set_title('Biomarker Correlation Matrix')
    _finish(fig, save_path)


def plot_elbow(elbow_df, save_path=None):
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(elbow_df['k'], elbow_df['wss'], 'o-', linewidth=2, markersize=8)
    ax.set_xticks(list(elbow_df['k']))
    ax.grid(True)
    ax.set_title('Optimal number of clusters (Elbow Method)')
    ax.set_xlabel('Number of clusters k')
    ax.set_ylabel('Total Within Sum of Squares')
    _finish(fig, save_path)


def plot_regression_diagnostics(diagnostics, save_path=None, n_labels=3):
    """
    Residuals vs Fitted, Normal Q-Q, Scale-Location and Residuals vs Leverage
    on a 2x2 grid, from the frame returned by regression.residual_diagnostics.
    The `n_labels` most influential observations (Cook's distance) are annotated.
    """
    fig, axes = plt.subplots(2, 2, figsize=(12, 10))
    fitted = diagnostics['fitted']
    flagged = diagnostics['cooks_d'].nlargest(n_labels).index

    ax = axes[0, 0]
    sns.scatterplot(x=fitted, y=diagnostics['resid'], ax=ax)
    ax.axhline(0, color='red', linestyle='--')
    ax.set_title('Residuals vs Fitted')
    ax.set_xlabel('Fitted values')
    ax.set_ylabel('Residuals')

    ax = axes[0, 1]
    sm.qqplot(diagnostics['std_resid'], line='45', ax=ax)
    ax.set_title('Normal Q-Q')
    ax.set_ylabel('Standardized residuals')

    ax = axes[1, 0]
    sns.scatterplot(x=fitted, y=np.sqrt(np.abs(diagnostics['std_resid'])), ax=ax)
    ax.set_title('Scale-Location')
    ax.set_xlabel('Fitted values')
    ax.set_ylabel(r'$\sqrt{|Standardized\ residuals|}$')

    ax = axes[1, 1]
    sns.scatterplot(x=diagnostics['leverage'], y=diagnostics['std_resid'], ax=ax)
    ax.axhline(0, color='grey', linestyle='--')
    for idx in flagged:
        ax.annotate(str(idx), (diagnostics.loc[idx, 'leverage'], diagnostics.loc[idx, 'std_resid']))
    ax.set_title('Residuals vs Leverage')
    ax.set_xlabel('Leverage')
    ax.set_ylabel('Standardized residuals')

    _finish(fig, save_path)


def plot_clusters(X_scaled, labels, save_path=None):
    """
    Plot clusters using PCA-reduced 2D representation.

    Parameters:
        X_scaled (np.ndarray): Scaled feature array.
        labels (list or np.ndarray): Cluster labels.
        save_path (str): Optional path to save the plot. If None, displays the plot.
    """
    pca = PCA(n_components=2)
    components = pca.fit_transform(X_scaled)
    df_plot = pd.DataFrame(data=components, columns=['PC1', 'PC2'])
    df_plot[CLUSTER_COLUMN] = pd.Categorical([str(label) for label in labels])

    fig, ax = plt.subplots(figsize=(8, 6))
    sns.scatterplot(x='PC1', y='PC2', hue=CLUSTER_COLUMN, data=df_plot, palette='Set2', s=50, ax=ax)
    ratio = pca.explained_variance_ratio_ * 100
    ax.set_title('Athlete Profiles (KMeans)')
    ax.set_xlabel(f'Principal Component 1 ({ratio[0]:.1f}%)')
    ax.set_ylabel(f'Principal Component 2 ({ratio[1]:.1f}%)')
    _finish(fig, save_path)


def plot_pairwise(df, columns=BIOMARKERS, save_path=None):
    grid = sns.pairplot(_with_cluster_hue(df), vars=list(columns), hue=CLUSTER_COLUMN,
                        diag_kind='kde', palette='Dark2', plot_kws={'alpha': 0.7})
    grid.figure.suptitle('Pairwise Biomarkers by Cluster', y=1.02)
    _finish(grid.figure, save_path)


def plot_vo2max_recovery(df, save_path=None):
    with sns.axes_style('whitegrid'):
        fig, ax = plt.subplots(figsize=(8, 6))
        sns.scatterplot(x='VO2max', y=TARGET, hue=CLUSTER_COLUMN, data=_with_cluster_hue(df),
                        palette='Dark2', s=60, ax=ax)
    ax.set_title('VO2max vs Recovery Time by Cluster')
    ax.set_xlabel('VO2max (ml/kg/min)')
    ax.set_ylabel('Recovery Time (Hours)')
    _finish(fig, save_path)
