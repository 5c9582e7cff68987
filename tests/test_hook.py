#!/usr/bin/env python3
"""
Tests for the command-line hook entry point.
"""

import io
import json
import os
import shutil
import sys
import tempfile
import time
import unittest
from unittest.mock import patch

from llm_supervisor.constants import STATE_KEY


class HookTestCase(unittest.TestCase):
    """Runs hooks against temp config/state files."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.temp_dir, "config.json")
        self.state_path = os.path.join(self.temp_dir, "state.json")
        self.patchers = [
            patch("llm_supervisor.hook.DEFAULT_CONFIG_PATH", self.config_path),
            patch("llm_supervisor.hook.DEFAULT_STATE_PATH", self.state_path),
        ]
        for patcher in self.patchers:
            patcher.start()

    def tearDown(self):
        for patcher in self.patchers:
            patcher.stop()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def write_config(self, **config):
        with open(self.config_path, "w") as f:
            json.dump(config, f)

    def write_state(self, **state):
        with open(self.state_path, "w") as f:
            json.dump({STATE_KEY: state}, f)

    def read_state(self):
        with open(self.state_path) as f:
            return json.load(f)[STATE_KEY]

    def run_main(self, hook_name, payload=None):
        """Run main() and return (exit_code, parsed stdout)."""
        from llm_supervisor.hook import main

        stdin = io.StringIO(json.dumps(payload) if payload is not None else "")
        stdout = io.StringIO()
        stderr = io.StringIO()

        with patch.object(sys, "argv", ["llm-supervisor", hook_name]), patch.object(
            sys, "stdin", stdin
        ), patch.object(sys, "stdout", stdout), patch.object(sys, "stderr", stderr):
            with self.assertRaises(SystemExit) as cm:
                main()

        self.stderr = stderr.getvalue()
        return cm.exception.code, json.loads(stdout.getvalue())


class TestAgentStartHook(HookTestCase):
    def test_cloud_profile_on_first_run(self):
        code, result = self.run_main("agent_start")

        self.assertEqual(code, 0)
        self.assertEqual(result, {"profile": "anthropic:default"})

    def test_local_profile_during_cooldown(self):
        self.write_config(localModel="mistral")
        self.write_state(mode="local", since=int(time.time() * 1000))

        _, result = self.run_main("agent_start")

        self.assertEqual(result["profile"]["provider"], "ollama")
        self.assertEqual(result["profile"]["model"], "mistral")

    def test_recovery_reports_notification(self):
        self.write_state(mode="local", since=0)

        _, result = self.run_main("agent_start")

        self.assertEqual(result["profile"], "anthropic:default")
        self.assertIn("cloud LLM", result["systemMessage"])
        self.assertEqual(self.read_state()["mode"], "cloud")


class TestLLMErrorHook(HookTestCase):
    def test_rate_limit_switches_to_local(self):
        code, result = self.run_main(
            "llm_error", {"error": {"message": "429 Too Many Requests"}}
        )

        self.assertEqual(code, 0)
        self.assertEqual(result["mode"], "local")
        self.assertTrue(result["switched"])
        self.assertIn("qwen2.5:7b", result["systemMessage"])
        self.assertEqual(self.read_state()["lastError"], "429 Too Many Requests")

    def test_other_error_keeps_cloud(self):
        _, result = self.run_main("llm_error", {"error": {"message": "bad key"}})

        self.assertEqual(result, {"mode": "cloud", "switched": False})
        self.assertFalse(os.path.exists(self.state_path))

    def test_missing_error_payload(self):
        _, result = self.run_main("llm_error", {})

        self.assertEqual(result["mode"], "cloud")


class TestBeforeTaskExecuteHook(HookTestCase):
    def payload(self, intent, message):
        return {"task": {"intent": intent}, "context": {"lastUserMessage": message}}

    def test_blocks_with_exit_code_2(self):
        self.write_state(mode="local", since=int(time.time() * 1000))

        code, result = self.run_main(
            "before_task_execute", self.payload("write_code", "write it")
        )

        self.assertEqual(code, 2)
        self.assertEqual(result["decision"], "block")
        self.assertIn("CONFIRM LOCAL", result["reason"])

    def test_allows_confirmed_task(self):
        self.write_state(mode="local", since=int(time.time() * 1000))

        code, result = self.run_main(
            "before_task_execute", self.payload("write_code", "CONFIRM LOCAL")
        )

        self.assertEqual(code, 0)
        self.assertEqual(result, {"continue": True})

    def test_disabled_master_switch_allows(self):
        self.write_config(enabled=False)
        self.write_state(mode="local", since=int(time.time() * 1000))

        code, result = self.run_main(
            "before_task_execute", self.payload("write_code", "")
        )

        self.assertEqual(code, 0)
        self.assertEqual(result, {"continue": True})


class TestUserPromptSubmitHook(HookTestCase):
    def test_command_is_executed_and_blocked(self):
        code, result = self.run_main(
            "user_prompt_submit", {"prompt": "llm-supervisor local"}
        )

        self.assertEqual(code, 2)
        self.assertIn("local mode", result["reason"])
        self.assertEqual(self.read_state()["mode"], "local")

    def test_regular_prompt_passes(self):
        code, result = self.run_main("user_prompt_submit", {"prompt": "hello"})

        self.assertEqual(code, 0)
        self.assertEqual(result, {"continue": True})


class TestMainErrorHandling(HookTestCase):
    def test_invalid_stdin_treated_as_empty(self):
        from llm_supervisor.hook import parse_hook_input

        self.assertEqual(parse_hook_input("{not json"), {})
        self.assertEqual(parse_hook_input("[1, 2]"), {})
        self.assertEqual(parse_hook_input(""), {})

    def test_unexpected_exception_degrades_to_allow(self):
        def explode(ctx, hook_data):
            raise RuntimeError("boom")

        with patch.dict("llm_supervisor.hook.HOOKS", {"before_task_execute": explode}):
            code, result = self.run_main("before_task_execute", {})

        self.assertEqual(code, 0)
        self.assertEqual(result, {"continue": True})
        self.assertIn("[LLM-SUPERVISOR ERROR]", self.stderr)
        self.assertIn("boom", self.stderr)

    def test_unknown_hook_exits_1(self):
        from llm_supervisor.hook import main

        with patch.object(sys, "argv", ["llm-supervisor", "nope"]), patch.object(
            sys, "stderr", io.StringIO()
        ):
            with self.assertRaises(SystemExit) as cm:
                main()

        self.assertEqual(cm.exception.code, 1)


if __name__ == "__main__":
    unittest.main()
