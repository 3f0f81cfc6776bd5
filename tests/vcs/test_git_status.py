import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from vuku.vcs.git_client import FileStatus, GitClient


class DummyProc(SimpleNamespace):
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


STATUS_OUTPUT = "\0".join(
    [
        " M modified.py",
        "A  added.py",
        "MM both.py",
        "R  renamed_new.py",
        "renamed_old.py",
        "?? untracked.txt",
        " D gone.py",
        "D  removed.py",
        "",
    ]
)


class TestGitStatus(unittest.TestCase):
    def _client(self, mock_run):
        def fake_run(self, args, check=True):
            if args[0] == "status":
                return DummyProc(returncode=0, stdout=STATUS_OUTPUT, stderr="")
            raise AssertionError(f"Unexpected git command: {args}")

        mock_run.side_effect = fake_run
        return GitClient(Path("/repo"))

    def test_get_file_statuses_parses_porcelain_z(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            statuses = self._client(mock_run).get_file_statuses()
        self.assertIn(FileStatus(path="modified.py", staged=False), statuses)
        self.assertIn(FileStatus(path="added.py", staged=True), statuses)
        self.assertIn(FileStatus(path="both.py", staged=True), statuses)
        self.assertIn(FileStatus(path="both.py", staged=False), statuses)
        self.assertIn(FileStatus(path="renamed_new.py", staged=True), statuses)
        self.assertIn(FileStatus(path="untracked.txt", staged=False), statuses)
        self.assertIn(FileStatus(path="gone.py", staged=False), statuses)
        self.assertIn(FileStatus(path="removed.py", staged=True), statuses)
        self.assertTrue(all(status.path != "renamed_old.py" for status in statuses))

    def test_unstaged_and_staged_sets(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            client = self._client(mock_run)
            unstaged = client.get_unstaged_files()
            staged = client.get_staged_files()
        self.assertEqual(unstaged, {"modified.py", "both.py", "untracked.txt", "gone.py"})
        self.assertEqual(staged, {"added.py", "both.py", "renamed_new.py", "removed.py"})

    def test_every_query_reads_fresh_status(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            client = self._client(mock_run)
            client.get_unstaged_files()
            client.get_unstaged_files()
            client.get_staged_files()
            self.assertEqual(mock_run.call_count, 3)

    def test_status_arguments(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.return_value = DummyProc(returncode=0, stdout="", stderr="")
            client = GitClient(Path("/repo"))
            self.assertEqual(client.get_file_statuses(), [])
            args = mock_run.call_args[0][1]
        self.assertEqual(args, ["status", "--porcelain", "-z", "--untracked-files=all"])


if __name__ == "__main__":
    unittest.main()
