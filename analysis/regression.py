import pandas as pd
import statsmodels.api as sm


def fit_fertility_model(df: pd.DataFrame):
    """OLS fit of fertility_rate ~ gdp_per_capita over every row of df."""
    X = sm.add_constant(df[["gdp_per_capita"]], has_constant="add")
    model = sm.OLS(df["fertility_rate"], X)
    return model.fit()


def regression_stats(results) -> dict:
    return {
        "intercept": float(results.params["const"]),
        "slope": float(results.params["gdp_per_capita"]),
        "intercept_se": float(results.bse["const"]),
        "slope_se": float(results.bse["gdp_per_capita"]),
        "r_squared": float(results.rsquared),
        "f_statistic": float(results.fvalue),
        "n_obs": int(results.nobs),
    }
