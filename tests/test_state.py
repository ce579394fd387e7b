"""Tests for session schema, stores and the session manager."""

import json

import pytest

from tribunal.state import (
    ActiveEffect,
    JsonSessionStore,
    MemorySessionStore,
    SessionManager,
    SessionState,
    SessionStore,
    Vitals,
)
from tribunal.systems import TickOrchestrator

from conftest import SESSION_ID


class TestSchema:
    """Test persisted model shape."""

    def test_dump_uses_host_keys(self):
        state = SessionState(id="abc")
        state.vitals.active_effects.append(ActiveEffect(id="smoking", remaining_messages=3))

        data = json.loads(state.model_dump_json(by_alias=True))

        effect = data["vitals"]["activeEffects"][0]
        assert effect == {"id": "smoking", "remainingMessages": 3, "stacks": 1, "source": "manual"}
        assert "messageCount" in data

    def test_load_host_keys(self):
        state = SessionState.model_validate({
            "id": "abc",
            "cravings": {"nicotine": {"messagesSinceUse": 2, "nextCravingAt": 3}},
            "inventory": {"addictions": {"nicotine": {"level": 2}}},
        })

        assert state.cravings["nicotine"].next_craving_at == 3
        assert state.inventory.addictions["nicotine"].level == 2

    def test_corrupt_effect_list_loads_empty(self):
        vitals = Vitals.model_validate({"activeEffects": "garbage"})

        assert vitals.active_effects == []

    def test_null_effect_list_loads_empty(self):
        vitals = Vitals.model_validate({"activeEffects": None})

        assert vitals.active_effects == []

    def test_malformed_entries_dropped(self):
        vitals = Vitals.model_validate({"activeEffects": [
            {"id": "smoking", "remainingMessages": 2},
            {"id": "broken"},
            {"id": "dead", "remainingMessages": 0},
            "nonsense",
        ]})

        assert [e.id for e in vitals.active_effects] == ["smoking"]

    def test_item_extra_keys_kept(self):
        state = SessionState.model_validate({
            "inventory": {"items": [{"name": "Astra", "type": "cigarette", "brand": "Astra"}]},
        })

        item = state.inventory.items[0]
        assert item.model_dump()["brand"] == "Astra"
        assert item.quantity == 1

    def test_find_item_case_insensitive(self):
        state = SessionState.model_validate({
            "inventory": {"items": [
                {"name": "Astra", "type": "cigarette", "quantity": 0},
                {"name": "Commodore Red", "type": "alcohol"},
            ]},
        })

        assert state.inventory.find_item("commodore red").type == "alcohol"
        assert state.inventory.find_item("astra") is None


class TestMemorySessionStore:
    """Test MemorySessionStore."""

    def test_implements_protocol(self):
        assert isinstance(MemorySessionStore(), SessionStore)

    def test_save_load_delete(self, memory_store):
        state = SessionState(id="abc")
        memory_store.save(state)

        assert memory_store.exists("abc")
        assert memory_store.load("abc") is state
        assert memory_store.delete("abc")
        assert memory_store.load("abc") is None
        assert memory_store.delete("abc") is False


class TestJsonSessionStore:
    """Test JsonSessionStore against a temp directory."""

    @pytest.fixture
    def json_store(self, tmp_path):
        return JsonSessionStore(tmp_path / "sessions")

    def test_implements_protocol(self, json_store):
        assert isinstance(json_store, SessionStore)

    def test_round_trip(self, json_store):
        state = SessionState(id="abc")
        state.vitals.active_effects.append(
            ActiveEffect(id="intoxicated", remaining_messages=4, stacks=2, source="beer")
        )
        json_store.save(state)

        loaded = json_store.load("abc")

        assert loaded.vitals.find_effect("intoxicated").stacks == 2

    def test_writes_alias_keys(self, json_store, tmp_path):
        json_store.save(SessionState(id="abc"))

        raw = json.loads((tmp_path / "sessions" / "abc.json").read_text(encoding="utf-8"))
        assert "activeEffects" in raw["vitals"]

    def test_backup_on_overwrite(self, json_store, tmp_path):
        state = SessionState(id="abc")
        json_store.save(state)
        state.message_count = 5
        json_store.save(state)

        backup = json.loads((tmp_path / "sessions" / "abc.json.bak").read_text(encoding="utf-8"))
        assert backup["messageCount"] == 0

    def test_backup_copies_bytes(self, json_store, tmp_path):
        session_file = tmp_path / "sessions" / "abc.json"
        original = b'{"id": "abc", "vitals": {"\xff\xfe": 1}}'
        session_file.write_bytes(original)

        json_store.save(SessionState(id="abc"))

        assert (tmp_path / "sessions" / "abc.json.bak").read_bytes() == original
        assert json_store.load("abc").id == "abc"

    def test_missing_is_none(self, json_store):
        assert json_store.load("nobody") is None
        assert json_store.exists("nobody") is False
        assert json_store.delete("nobody") is False


class BrokenStore(MemorySessionStore):
    """Store whose reads and writes both fail."""

    def load(self, session_id):
        raise OSError("disk gone")

    def save(self, state):
        raise OSError("disk gone")


class TestSessionManager:
    """Test SessionManager degradation."""

    def test_new_session_is_empty(self, manager):
        state = manager.current

        assert state.id == SESSION_ID
        assert state.vitals.active_effects == []

    def test_loads_lazily_once(self, manager, memory_store):
        assert manager.current is manager.current

    def test_save_then_reload(self, manager, memory_store):
        manager.current.message_count = 4
        assert manager.save()

        other = SessionManager(memory_store, SESSION_ID)
        assert other.current.message_count == 4

    def test_save_without_state(self, manager):
        assert manager.save() is False

    def test_no_store(self):
        manager = SessionManager(None, SESSION_ID)
        manager.current.message_count = 1

        assert manager.save() is False
        assert manager.current.message_count == 1

    def test_unreadable_store_is_empty(self):
        manager = SessionManager(BrokenStore(), SESSION_ID)

        assert manager.current.vitals.active_effects == []

    def test_write_failure_skipped(self):
        manager = SessionManager(BrokenStore(), SESSION_ID)
        manager.current.message_count = 3

        assert manager.save() is False
        assert manager.current.message_count == 3

    def test_corrupt_json_is_empty(self, tmp_path):
        store = JsonSessionStore(tmp_path)
        (tmp_path / f"{SESSION_ID}.json").write_text("{not json", encoding="utf-8")

        manager = SessionManager(store, SESSION_ID)

        assert manager.current.id == SESSION_ID
        assert manager.current.message_count == 0

    def test_invalid_shape_is_empty(self, tmp_path):
        store = JsonSessionStore(tmp_path)
        (tmp_path / f"{SESSION_ID}.json").write_text(
            json.dumps({"id": SESSION_ID, "messageCount": "many"}), encoding="utf-8",
        )

        manager = SessionManager(store, SESSION_ID)

        assert manager.current.message_count == 0

    def test_undecodable_file_is_empty(self, tmp_path):
        store = JsonSessionStore(tmp_path)
        (tmp_path / f"{SESSION_ID}.json").write_bytes(b'{"id": "test-session", "vitals": {"\xff\xfe": 1}}')

        manager = SessionManager(store, SESSION_ID)

        assert manager.current.message_count == 0
        assert manager.load_failed

    def test_undecodable_file_survives_tick(self, tmp_path):
        session_file = tmp_path / f"{SESSION_ID}.json"
        session_file.write_bytes(b'{"id": "test-session", "vitals": {"\xff\xfe": 1}}')

        result = TickOrchestrator(JsonSessionStore(tmp_path), SESSION_ID).message_tick()

        assert result.message_count == 1

    def test_failed_load_holds_saves(self, tmp_path):
        session_file = tmp_path / f"{SESSION_ID}.json"
        corrupt = json.dumps({
            "id": SESSION_ID,
            "inventory": {
                "items": [{"name": "Astra Cigarettes", "type": "cigarette", "quantity": 3}],
                "addictions": {"nicotine": {"level": 4}},
            },
            "cravings": {"nicotine": {"messagesSinceUse": "corrupt"}},
        })
        session_file.write_text(corrupt, encoding="utf-8")
        orchestrator = TickOrchestrator(JsonSessionStore(tmp_path), SESSION_ID)

        orchestrator.message_tick()
        orchestrator.message_tick()

        assert orchestrator.manager.load_failed
        assert orchestrator.manager.save() is False
        assert session_file.read_text(encoding="utf-8") == corrupt
        assert not (tmp_path / f"{SESSION_ID}.json.bak").exists()

    def test_reload_resumes_saving(self, tmp_path):
        session_file = tmp_path / f"{SESSION_ID}.json"
        session_file.write_text("{not json", encoding="utf-8")
        manager = SessionManager(JsonSessionStore(tmp_path), SESSION_ID)
        assert manager.current.message_count == 0
        assert manager.save() is False

        session_file.write_text(json.dumps({"id": SESSION_ID, "messageCount": 6}), encoding="utf-8")
        state = manager.reload()
        state.message_count += 1

        assert manager.load_failed is False
        assert manager.save()
        assert json.loads(session_file.read_text(encoding="utf-8"))["messageCount"] == 7

    def test_reload(self, manager, memory_store):
        manager.current.message_count = 2
        manager.save()
        memory_store.sessions[SESSION_ID] = SessionState(id=SESSION_ID, message_count=7)

        assert manager.reload().message_count == 7
