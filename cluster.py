# 6. cluster.py

import pandas as pd
from sklearn.cluster import KMeans
from sklearn.metrics import silhouette_score
from config import BIOMARKERS, CLUSTER_COLUMN


def elbow_curve(X, k_max=10, random_state=123, n_init=25):
    """Within-cluster sum of squares for k = 1..k_max."""
    k_max = min(k_max, len(X))
    wss = []
    for k in range(1, k_max + 1):
        model = KMeans(n_clusters=k, n_init=n_init, random_state=random_state)
        model.fit(X)
        wss.append(model.inertia_)
    return pd.DataFrame({'k': range(1, k_max + 1), 'wss': wss})


def train_kmeans(X, k=3, n_init=25, random_state=123, max_iter=300):
    model = KMeans(n_clusters=k, n_init=n_init, random_state=random_state,
                   max_iter=max_iter, algorithm='lloyd')
    labels = model.fit_predict(X) + 1
    n_labels = len(set(labels))
    score = silhouette_score(X, labels) if 1 < n_labels < len(X) else -1
    print(f"[INFO] KMeans (k={k}) within-cluster SS: {model.inertia_:.3f}, silhouette: {score:.3f}")
    return model, labels, score


def cluster_centers(model, columns):
    centers = pd.DataFrame(model.cluster_centers_, columns=list(columns))
    centers.index = pd.RangeIndex(1, len(centers) + 1, name=CLUSTER_COLUMN)
    return centers


def assign_clusters(df, labels, index=None):
    """
    Return a copy of `df` with the cluster labels appended as a categorical column.

    Parameters:
        df (pd.DataFrame): Unscaled observation table.
        labels (array-like): Cluster label per clustered row.
        index (pd.Index): Row labels of `df` that were clustered. Defaults to every row;
            rows left out get an empty label.
    """
    if index is None:
        index = df.index
    clusters = pd.Series(labels, index=index).reindex(df.index).astype('Int64')

    out = df.copy()
    out[CLUSTER_COLUMN] = clusters.astype('category')
    return out


def cluster_profiles(df, columns=BIOMARKERS):
    profiles = df.groupby(CLUSTER_COLUMN, observed=True)[list(columns)].mean()
    profiles['Num_Athletes'] = df.groupby(CLUSTER_COLUMN, observed=True).size()
    return profiles
