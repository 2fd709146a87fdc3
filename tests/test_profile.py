import unittest
import uuid
import asyncpg
from data_design.entities import Profile
from data_design.exceptions import (InvalidArgumentError,
                                    OutOfRangeError,
                                    RowConversionError)
from entity_fixtures import (VALID_ACTIVATION_TOKEN,
                             VALID_HASH,
                             VALID_SALT,
                             mock_connection)


def make_profile(**overrides) -> Profile:
    values = {
        "profile_id": uuid.uuid4(),
        "profile_activation_token": None,
        "profile_full_name": "Kenneth Keyes",
        "profile_caption": "hobbyist writer",
        "profile_email": "ken@example.com",
        "profile_hash": VALID_HASH,
        "profile_phone": None,
        "profile_salt": VALID_SALT,
    }
    values.update(overrides)
    return Profile(**values)


def profile_row(profile: Profile) -> dict:
    return {
        "profileId": profile.profile_id,
        "profileActivationToken": profile.profile_activation_token,
        "profileFullName": profile.profile_full_name,
        "profileCaption": profile.profile_caption,
        "profileEmail": profile.profile_email,
        "profileHash": profile.profile_hash,
        "profilePhone": profile.profile_phone,
        "profileSalt": profile.profile_salt,
    }


class TestProfileValidation(unittest.TestCase):

    def test_valid_profile_serializes_without_credentials(self):
        profile = make_profile()
        data = profile.serialize()

        self.assertEqual(data["profileId"], str(profile.profile_id))
        self.assertEqual(data["profileFullName"], "Kenneth Keyes")
        self.assertEqual(data["profileCaption"], "hobbyist writer")
        self.assertEqual(data["profileEmail"], "ken@example.com")
        self.assertIsNone(data["profilePhone"])
        self.assertNotIn("profileHash", data)
        self.assertNotIn("profileSalt", data)
        self.assertNotIn("profileActivationToken", data)

    def test_fields_are_normalised(self):
        profile = make_profile(profile_id=str(uuid.uuid4()),
                               profile_activation_token=" " +
                               VALID_ACTIVATION_TOKEN.upper(),
                               profile_full_name="  <i>Kenneth</i> Keyes ",
                               profile_hash=VALID_HASH.upper(),
                               profile_phone=" 505-555-1234 ")

        self.assertIsInstance(profile.profile_id, uuid.UUID)
        self.assertEqual(profile.profile_activation_token,
                         VALID_ACTIVATION_TOKEN)
        self.assertEqual(profile.profile_full_name, "Kenneth Keyes")
        self.assertEqual(profile.profile_hash, VALID_HASH)
        self.assertEqual(profile.profile_phone, "505-555-1234")

    def test_profile_id_is_read_only(self):
        profile = make_profile()
        with self.assertRaises(AttributeError):
            profile.profile_id = uuid.uuid4()

    def test_invalid_profile_id(self):
        with self.assertRaises(InvalidArgumentError):
            make_profile(profile_id="12345")

    def test_empty_text_fields_are_invalid_argument(self):
        for field in ["profile_full_name", "profile_caption",
                      "profile_email", "profile_phone"]:
            with self.subTest(field=field):
                with self.assertRaises(InvalidArgumentError):
                    make_profile(**{field: "   "})

    def test_over_length_text_fields_are_out_of_range(self):
        cases = {
            "profile_full_name": "x" * 33,
            "profile_caption": "x" * 141,
            "profile_phone": "5" * 33,
            "profile_email": "k" * 120 + "@example.com",
        }
        for field, value in cases.items():
            with self.subTest(field=field):
                with self.assertRaises(OutOfRangeError):
                    make_profile(**{field: value})

    def test_maximum_length_text_fields_are_accepted(self):
        profile = make_profile(profile_full_name="x" * 32,
                               profile_caption="y" * 140,
                               profile_phone="5" * 32)
        self.assertEqual(len(profile.profile_caption), 140)

    def test_invalid_email_syntax(self):
        with self.assertRaises(InvalidArgumentError):
            make_profile(profile_email="ken.example.com")

    def test_activation_token_errors_are_out_of_range(self):
        for value in ["zz" * 16, VALID_ACTIVATION_TOKEN[:-1],
                      VALID_ACTIVATION_TOKEN + "0", ""]:
            with self.subTest(value=value):
                with self.assertRaises(OutOfRangeError):
                    make_profile(profile_activation_token=value)

    def test_hash_errors(self):
        with self.assertRaises(InvalidArgumentError):
            make_profile(profile_hash="")

        with self.assertRaises(InvalidArgumentError):
            make_profile(profile_hash="g" * 128)

        with self.assertRaises(OutOfRangeError):
            make_profile(profile_hash=VALID_HASH[:64])

    def test_salt_errors(self):
        with self.assertRaises(InvalidArgumentError):
            make_profile(profile_salt="not hex at all")

        with self.assertRaises(OutOfRangeError):
            make_profile(profile_salt=VALID_SALT + "00")

    def test_setter_revalidates(self):
        profile = make_profile()
        profile.profile_caption = "now a full time writer"
        self.assertEqual(profile.profile_caption, "now a full time writer")

        with self.assertRaises(OutOfRangeError):
            profile.profile_caption = "x" * 141

        self.assertEqual(profile.profile_caption, "now a full time writer")

    def test_phone_can_be_cleared(self):
        profile = make_profile(profile_phone="5055551234")
        profile.profile_phone = None
        self.assertIsNone(profile.profile_phone)


class TestProfilePersistence(unittest.IsolatedAsyncioTestCase):

    async def test_insert_binds_every_column(self):
        profile = make_profile(profile_activation_token=VALID_ACTIVATION_TOKEN,
                               profile_phone="5055551234")
        connection = mock_connection()

        await profile.insert(connection)

        connection.execute.assert_awaited_once()
        query, *args = connection.execute.await_args.args
        self.assertTrue(query.startswith("INSERT INTO profile("))
        self.assertEqual(args, [profile.profile_id, VALID_ACTIVATION_TOKEN,
                                "Kenneth Keyes", "hobbyist writer",
                                "ken@example.com", VALID_HASH, "5055551234",
                                VALID_SALT])

    async def test_insert_propagates_store_failure(self):
        profile = make_profile()
        connection = mock_connection()
        connection.execute.side_effect = asyncpg.PostgresError("duplicate")

        with self.assertLogs("data_design.entities.store", level="ERROR"):
            with self.assertRaises(asyncpg.PostgresError):
                await profile.insert(connection)

    async def test_update_keys_on_profile_id(self):
        profile = make_profile()
        connection = mock_connection(execute_status="UPDATE 1")

        await profile.update(connection)

        query, *args = connection.execute.await_args.args
        self.assertTrue(query.startswith("UPDATE profile SET"))
        self.assertIn('WHERE "profileId" = $1', query)
        self.assertEqual(args[0], profile.profile_id)
        self.assertEqual(len(args), 8)

    async def test_update_missing_row_is_silent(self):
        profile = make_profile()
        connection = mock_connection(execute_status="UPDATE 0")

        with self.assertLogs("data_design.entities.store", level="WARNING"):
            result = await profile.update(connection)

        self.assertIsNone(result)

    async def test_delete(self):
        profile = make_profile()
        connection = mock_connection(execute_status="DELETE 1")

        await profile.delete(connection)

        connection.execute.assert_awaited_once_with(
            'DELETE FROM profile WHERE "profileId" = $1', profile.profile_id)

    async def test_delete_missing_row_is_silent(self):
        profile = make_profile()
        connection = mock_connection(execute_status="DELETE 0")

        with self.assertLogs("data_design.entities.store", level="WARNING"):
            await profile.delete(connection)


class TestProfileFinders(unittest.IsolatedAsyncioTestCase):

    async def test_get_by_profile_id_found(self):
        stored = make_profile()
        connection = mock_connection(fetchrow_result=profile_row(stored))

        profile = await Profile.get_profile_by_profile_id(
            connection, str(stored.profile_id))

        self.assertEqual(profile.profile_id, stored.profile_id)
        self.assertEqual(profile.profile_email, "ken@example.com")
        query, arg = connection.fetchrow.await_args.args
        self.assertIn('WHERE "profileId" = $1', query)
        self.assertEqual(arg, stored.profile_id)

    async def test_get_by_profile_id_accepts_binary_id(self):
        stored = make_profile()
        connection = mock_connection(fetchrow_result=profile_row(stored))

        profile = await Profile.get_profile_by_profile_id(
            connection, stored.profile_id.bytes)

        self.assertEqual(profile.profile_id, stored.profile_id)

    async def test_get_by_profile_id_not_found(self):
        connection = mock_connection(fetchrow_result=None)
        self.assertIsNone(
            await Profile.get_profile_by_profile_id(connection, uuid.uuid4()))

    async def test_get_by_profile_id_rejects_bad_id_before_query(self):
        connection = mock_connection()

        with self.assertRaises(InvalidArgumentError):
            await Profile.get_profile_by_profile_id(connection, "bogus")

        connection.fetchrow.assert_not_awaited()

    async def test_get_by_email(self):
        stored = make_profile()
        connection = mock_connection(fetchrow_result=profile_row(stored))

        profile = await Profile.get_profile_by_profile_email(
            connection, " ken@example.com ")

        self.assertEqual(profile.profile_full_name, "Kenneth Keyes")
        self.assertEqual(connection.fetchrow.await_args.args[1],
                         "ken@example.com")

    async def test_get_by_email_rejects_invalid_email(self):
        connection = mock_connection()

        with self.assertRaises(InvalidArgumentError):
            await Profile.get_profile_by_profile_email(connection, "nope")

        connection.fetchrow.assert_not_awaited()

    async def test_get_by_activation_token(self):
        stored = make_profile(profile_activation_token=VALID_ACTIVATION_TOKEN)
        connection = mock_connection(fetchrow_result=profile_row(stored))

        profile = await Profile.get_profile_by_profile_activation_token(
            connection, VALID_ACTIVATION_TOKEN.upper())

        self.assertEqual(profile.profile_activation_token,
                         VALID_ACTIVATION_TOKEN)
        self.assertEqual(connection.fetchrow.await_args.args[1],
                         VALID_ACTIVATION_TOKEN)

    async def test_get_by_activation_token_rejects_non_hex(self):
        connection = mock_connection()

        with self.assertRaises(InvalidArgumentError):
            await Profile.get_profile_by_profile_activation_token(
                connection, "not-a-token")

    async def test_get_by_full_name_escapes_and_wraps_pattern(self):
        first = make_profile(profile_full_name="Ken_1")
        second = make_profile(profile_email="ken2@example.com",
                              profile_full_name="Ken_1 Keyes")
        connection = mock_connection(
            fetch_result=[profile_row(first), profile_row(second)])

        profiles = await Profile.get_profiles_by_profile_full_name(
            connection, " Ken_1 ")

        self.assertEqual([p.profile_id for p in profiles],
                         [first.profile_id, second.profile_id])
        query, pattern = connection.fetch.await_args.args
        self.assertIn('"profileFullName" LIKE $1', query)
        self.assertEqual(pattern, "%Ken\\_1%")

    async def test_get_by_full_name_empty_result(self):
        connection = mock_connection(fetch_result=[])
        self.assertEqual(
            await Profile.get_profiles_by_profile_full_name(connection, "Zed"),
            [])

    async def test_get_by_full_name_rejects_empty_term(self):
        connection = mock_connection()

        with self.assertRaises(InvalidArgumentError):
            await Profile.get_profiles_by_profile_full_name(connection,
                                                            " <b></b> ")

        connection.fetch.assert_not_awaited()

    async def test_corrupt_row_raises_row_conversion_error(self):
        row = profile_row(make_profile())
        row["profileSalt"] = "abc"
        connection = mock_connection(fetchrow_result=row)

        with self.assertRaises(RowConversionError) as context:
            await Profile.get_profile_by_profile_id(connection, uuid.uuid4())

        self.assertIsInstance(context.exception.__cause__, OutOfRangeError)
