import pytest
from sqlalchemy import inspect
import campus_occupancy.common.database as database
from campus_occupancy.common.database import create_db_engine, create_session_factory, init_db


def test_init_db_creates_tables_on_given_engine():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    assert set(inspect(engine).get_table_names()) == {"occupancy_observations", "prediction_cache"}
    engine.dispose()


def test_init_db_requires_an_engine():
    with pytest.raises(TypeError):
        init_db()


def test_no_module_level_engine_or_session_dependency():
    assert not hasattr(database, "default_engine")
    assert not hasattr(database, "get_db")


def test_session_factory_keeps_objects_loaded_after_commit():
    engine = create_db_engine("sqlite://")
    factory = create_session_factory(engine)
    assert factory.kw["expire_on_commit"] is False
    assert factory.kw["bind"] is engine
    engine.dispose()
