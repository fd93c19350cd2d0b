# 4. regression.py

import numpy as np
import pandas as pd
import statsmodels.formula.api as smf
from config import PREDICTORS, TARGET
from preprocess import require_columns


def build_formula(target=TARGET, predictors=PREDICTORS):
    return f"{target} ~ " + " + ".join(predictors)


def fit_recovery_model(df, target=TARGET, predictors=PREDICTORS):
    """
    Fit an ordinary least squares model of `target` on `predictors`.

    Rows with a missing value in any model column are dropped before fitting.
    A rank-deficient design matrix (perfectly collinear predictors) raises
    numpy.linalg.LinAlgError.

    Returns:
        statsmodels RegressionResults: The fitted model.
    """
    require_columns(df, [target] + list(predictors))
    model = smf.ols(build_formula(target, predictors), data=df)

    rank = np.linalg.matrix_rank(model.exog)
    if rank < model.exog.shape[1]:
        raise np.linalg.LinAlgError(
            f"Design matrix is rank deficient (rank {rank} < {model.exog.shape[1]} columns)"
        )

    results = model.fit()
    print(f"[INFO] Fitted OLS on {int(results.nobs)} observations, R-squared: {results.rsquared:.3f}")
    return results


def summarize_model(results):
    coefficients = pd.DataFrame({
        'Estimate': results.params,
        'Std. Error': results.bse,
        't value': results.tvalues,
        'Pr(>|t|)': results.pvalues
    })
    stats = {
        'residual_std_error': float(np.sqrt(results.scale)),
        'df_resid': int(results.df_resid),
        'r_squared': float(results.rsquared),
        'adj_r_squared': float(results.rsquared_adj),
        'f_statistic': float(results.fvalue),
        'f_df_model': int(results.df_model),
        'f_df_resid': int(results.df_resid),
        'f_pvalue': float(results.f_pvalue),
        'n_obs': int(results.nobs)
    }
    return coefficients, stats


def residual_diagnostics(results):
    """
    Per-observation values behind the four residual plots: fitted values,
    raw and internally studentized residuals, leverage and Cook's distance.
    """
    influence = results.get_influence()
    return pd.DataFrame({
        'fitted': np.asarray(results.fittedvalues),
        'resid': np.asarray(results.resid),
        'std_resid': influence.resid_studentized_internal,
        'leverage': influence.hat_matrix_diag,
        'cooks_d': influence.cooks_distance[0]
    }, index=results.fittedvalues.index)
