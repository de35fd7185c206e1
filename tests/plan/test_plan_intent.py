import unittest

from gdrivewrap.errors import AlreadyExistsError
from gdrivewrap.plan import Action, TransferIntent


class TestTransferIntent(unittest.TestCase):
    def test_validate_required_fields_create(self) -> None:
        TransferIntent(Action.CREATE_FILE, parent_id="root", name="a.txt").validate_required_fields()
        # get direction: the Drive item to fetch replaces parent/name.
        TransferIntent(Action.CREATE_FILE, target_id="0F1").validate_required_fields()

    def test_update_requires_non_empty_target(self) -> None:
        with self.assertRaises(ValueError):
            TransferIntent(Action.UPDATE_FILE, target_id="").validate_required_fields()
        with self.assertRaises(ValueError):
            TransferIntent(Action.CREATE_DIRECTORY, name="d").validate_required_fields()

    def test_raise_for_error(self) -> None:
        intent = TransferIntent.error(AlreadyExistsError, "destination file exists")
        self.assertTrue(intent.is_error)
        with self.assertRaises(AlreadyExistsError) as ctx:
            intent.raise_for_error(details={"remote_path": "/a"})
        self.assertEqual(str(ctx.exception), "destination file exists")
        self.assertEqual(ctx.exception.details, {"remote_path": "/a"})

    def test_raise_for_error_noop_for_success(self) -> None:
        TransferIntent(Action.UPDATE_FILE, target_id="F1").raise_for_error()


if __name__ == "__main__":
    unittest.main()
