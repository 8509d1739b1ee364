import serve

class _FakeServer:
   def __init__(self):
      self.ran = False

   def run(self):
      self.ran = True

def test_missing_key_exits_with_error(monkeypatch, capsys):
   monkeypatch.delenv("DEVTO_API_KEY", raising=False)
   assert serve.main([]) == 1
   assert "DEVTO_API_KEY" in capsys.readouterr().err

def test_flags_override_environment(monkeypatch):
   monkeypatch.setenv("DEVTO_API_KEY", "k")
   monkeypatch.setenv("DEVTO_TIMEOUT", "30")
   seen = {}
   fake = _FakeServer()

   def fake_create_server(config):
      seen["config"] = config
      return fake

   monkeypatch.setattr(serve, "create_server", fake_create_server)
   assert serve.main(["--timeout", "3", "--enable-reactions", "--log-level", "debug"]) == 0
   assert fake.ran
   assert seen["config"].timeout == 3.0
   assert seen["config"].enable_reactions is True
