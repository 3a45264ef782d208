import pygame

from gridpath.input_handler import InputHandler


def feed(monkeypatch, events):
    monkeypatch.setattr(pygame.event, "get", lambda: list(events))


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=0)


def test_arrow_keys_move_cursor(monkeypatch):
    handler = InputHandler()
    feed(monkeypatch, [keydown(pygame.K_UP), keydown(pygame.K_RIGHT)])
    handler.process_events()
    assert handler.cursor_moves() == [(-1, 0), (0, 1)]
    assert handler.commands() == []
    assert not handler.should_quit()


def test_command_keys(monkeypatch):
    handler = InputHandler()
    feed(
        monkeypatch,
        [keydown(pygame.K_w), keydown(pygame.K_SPACE), keydown(pygame.K_h)],
    )
    handler.process_events()
    assert handler.commands() == ["add_wall", "find_path", "cycle_heuristic"]


def test_quit_sources(monkeypatch):
    handler = InputHandler()
    for event in (pygame.event.Event(pygame.QUIT), keydown(pygame.K_q)):
        feed(monkeypatch, [event])
        handler.process_events()
        assert handler.should_quit()


def test_state_resets_each_frame(monkeypatch):
    handler = InputHandler()
    feed(monkeypatch, [keydown(pygame.K_c), keydown(pygame.K_DOWN)])
    handler.process_events()
    feed(monkeypatch, [])
    handler.process_events()
    assert handler.commands() == []
    assert handler.cursor_moves() == []


def test_unmapped_key_ignored(monkeypatch):
    handler = InputHandler()
    feed(monkeypatch, [keydown(pygame.K_z)])
    handler.process_events()
    assert handler.commands() == [] and handler.cursor_moves() == []
