from app.db.session import engine, Session, init_db
from app.db.seed import load_seed_yaml, seed_todos


def run_seed(seed_path: str = "app/db/seed_data.yaml") -> None:
    init_db()
    with Session(engine) as session:
        created = seed_todos(session, load_seed_yaml(seed_path))
        print(f"{len(created)} todo(s) créé(s)")


if __name__ == "__main__":
    run_seed()
