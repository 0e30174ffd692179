from ..utils import EnvironmentManager, EnvironmentVariables


def get_database_url() -> str:
    """
    Build the SQLAlchemy URL from the DATABASE_* environment variables.

    :return: sqlite URL for DATABASE_TYPE=sqlite, a psycopg2 PostgreSQL URL otherwise.
    """
    name = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_NAME)
    if EnvironmentManager.get_string(EnvironmentVariables.DATABASE_TYPE) == "sqlite":
        return f"sqlite:///{name}"

    user = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_USER)
    password = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_PASSWORD)
    host = EnvironmentManager.get_string(EnvironmentVariables.DATABASE_HOST)
    port = EnvironmentManager.get_int(EnvironmentVariables.DATABASE_PORT)
    return f"postgresql+psycopg2://{user}:{password}@{host}:{port}/{name}"
