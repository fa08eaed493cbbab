from datetime import datetime
from airflow import DAG
from airflow.operators.python import PythonOperator

from review_lexicon import convert, orchestration, visualization

DEFAULT_ARGS = {"owner": "data-eng", "retries": 0}

dag = DAG(
    dag_id="review_lexicon",
    default_args=DEFAULT_ARGS,
    schedule=None,
    start_date=datetime(2025, 1, 1),
    catchup=False,
)

flatten = PythonOperator(
    task_id="convert",
    python_callable=convert.convert_records,
    op_kwargs={"src": "data/raw/reviews_Video_Games_5.json.gz", "dest": "data/raw/reviews.csv"},
    dag=dag,
)

score = PythonOperator(
    task_id="score",
    python_callable=orchestration.run,
    op_kwargs={"input_path": "data/raw/reviews.csv", "plots": False},
    do_xcom_push=False,  # PipelineResult holds DataFrames
    dag=dag,
)

render = PythonOperator(
    task_id="render",
    python_callable=visualization.render_exported,
    dag=dag,
)

flatten >> score >> render
