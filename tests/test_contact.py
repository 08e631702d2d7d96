import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_samples import TECH_CV  # noqa: E402
from cvmatch.features.contact import (  # noqa: E402
    extract_contact,
    extract_email,
    extract_linkedin,
    extract_location,
    extract_phone,
)


class ContactExtractionTests(unittest.TestCase):
    def test_full_contact_line(self):
        contact = extract_contact(TECH_CV)
        self.assertEqual(contact.email, "jane.doe@example.com")
        self.assertEqual(contact.phone, "+1 555 234 5678")
        self.assertEqual(contact.linkedin, "linkedin.com/in/janedoe")
        self.assertEqual(contact.location, "London")

    def test_year_ranges_are_not_phone_numbers(self):
        self.assertEqual(extract_phone("Software Developer, Acme Corp 2019 - 2024"), "")
        self.assertEqual(extract_phone("Worked 2019-2024, then call (021) 555-0199"), "(021) 555-0199")

    def test_phone_numbers_do_not_span_lines(self):
        self.assertEqual(extract_phone("Class of 2014\n120 students mentored"), "")
        phone = extract_phone("BSc Physics 2015 - 2019\n020 7946 0958")
        self.assertEqual(phone, "020 7946 0958")
        self.assertNotIn("\n", phone)

    def test_short_numbers_are_ignored(self):
        self.assertEqual(extract_phone("Improved conversion by 12 points in 2023"), "")

    def test_linkedin_trailing_slash_is_dropped(self):
        self.assertEqual(
            extract_linkedin("Profile: https://www.LinkedIn.com/in/jane-doe/"),
            "LinkedIn.com/in/jane-doe",
        )

    def test_location_prefers_city_over_country(self):
        self.assertEqual(extract_location("Based in Cape Town, South Africa"), "Cape Town")
        self.assertEqual(extract_location("jane@example.com | +44 20 7946 0958 | Remote"), "Remote")

    def test_remote_in_prose_is_not_a_location(self):
        self.assertEqual(extract_location("Open to remote work"), "")
        self.assertEqual(extract_location("Led remote teams across three time zones"), "")
        self.assertEqual(extract_location("Jane Doe\nFully Remote (EU hours)"), "Remote")

    def test_short_country_codes_are_case_sensitive(self):
        self.assertEqual(extract_location("Relocating to the UK next year"), "UK")
        self.assertEqual(extract_location("I uk-ed nothing"), "")

    def test_missing_fields_are_empty(self):
        contact = extract_contact("No contact details here at all")
        self.assertEqual(extract_email("no email"), "")
        self.assertEqual(contact.model_dump(), {"email": "", "phone": "", "linkedin": "", "location": ""})


if __name__ == "__main__":
    unittest.main()
