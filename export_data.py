# 8. export_data.py

def export_data(df, output_path="processed_athlete_biomarker_dataset.csv"):
    """
    Write the clustered table to CSV, overwriting any existing file.

    Parameters:
        df (pd.DataFrame): Observation table with the 'Cluster' column appended.
        output_path (str): File path to write. Default is 'processed_athlete_biomarker_dataset.csv'.

    Returns:
        str: The path written.
    """
    df.to_csv(output_path, index=False)
    print(f"[INFO] Clustered data saved to: {output_path}")
    return output_path
