import pandas as pd

from kshortest.benchmark import run_benchmark, save_benchmark


def test_benchmark_rows_and_csv(tmp_path):
    df = run_benchmark(n_graphs=2, queries_per_graph=3, k=4, vertex_range=(10, 20), edge_prob=0.3, seed=1)
    assert len(df) == 6
    assert (df["paths_found"] <= 4).all()
    assert (df["total_ms"] >= df["search_ms"]).all()

    output = tmp_path / "data" / "bench.csv"
    save_benchmark(df, str(output))
    loaded = pd.read_csv(output)
    assert list(loaded.columns) == list(df.columns)
    assert len(loaded) == 6
