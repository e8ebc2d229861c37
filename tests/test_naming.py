"""
Tests for the naming conventions: tokenizing, casing and keyword escaping.
"""

from unittest import TestCase

from schema_enricher.constants import CSHARP, PYTHON
from schema_enricher.domain.naming import (
    NamingConventions,
    clean_identifier,
    generate_class_name,
    split_words,
    strip_id_suffix,
    to_identifier,
)


class TestSplitWords(TestCase):
    """Test cases for split_words"""

    def test_camel_hump_and_trailing_acronym(self):
        """Test camel hump and trailing acronym"""
        assert split_words("BusinessEntityID") == ["Business", "Entity", "ID"]

    def test_underscore_separator_is_dropped(self):
        """Test underscore separator is dropped"""
        assert split_words("Employee_SSN") == ["Employee", "SSN"]

    def test_acronym_followed_by_word(self):
        """Test acronym followed by word"""
        self.assertEqual(split_words("IDCard"), ["ID", "Card"])

    def test_invalid_characters_act_as_separators(self):
        """Test invalid characters act as separators"""
        self.assertEqual(split_words("first name"), ["first", "name"])
        self.assertEqual(split_words("Unit-Price"), ["Unit", "Price"])
        self.assertEqual(split_words("Rate%"), ["Rate"])

    def test_leading_lowercase_prefix(self):
        """Test leading lowercase prefix"""
        self.assertEqual(split_words("vSalesPerson"), ["v", "Sales", "Person"])

    def test_digits_stay_with_their_word(self):
        """Test digits stay with their word"""
        self.assertEqual(split_words("Address2Line"), ["Address2", "Line"])

    def test_separator_only_name(self):
        """Test separator only name"""
        self.assertEqual(split_words("___"), [])
        self.assertEqual(split_words(""), [])

    def test_non_string_rejected(self):
        """Test non string rejected"""
        with self.assertRaises(TypeError):
            split_words(None)


class TestToIdentifier(TestCase):
    """Test cases for to_identifier and clean_identifier"""

    def test_single_lowercase_prefix_preserved(self):
        """Test single lowercase prefix preserved"""
        assert to_identifier(["v", "Sales", "Person"]) == "vSalesPerson"

    def test_acronyms_are_title_cased(self):
        """Test acronyms are title cased"""
        self.assertEqual(clean_identifier("BusinessEntityID"), "BusinessEntityId")
        self.assertEqual(clean_identifier("Employee_SSN"), "EmployeeSsn")

    def test_single_uppercase_first_word_is_not_a_prefix(self):
        """Test single uppercase first word is not a prefix"""
        self.assertEqual(to_identifier(["X", "coordinate"]), "XCoordinate")

    def test_multi_letter_lowercase_first_word_is_title_cased(self):
        """Test multi letter lowercase first word is title cased"""
        self.assertEqual(clean_identifier("first_name"), "FirstName")

    def test_leading_digit_gets_underscore(self):
        """Test leading digit gets underscore"""
        self.assertEqual(clean_identifier("2ndAddress"), "_2ndAddress")

    def test_empty_name_falls_back_to_underscore(self):
        """Test empty name falls back to underscore"""
        self.assertEqual(clean_identifier("___"), "_")

    def test_csharp_keyword_escaped_with_at(self):
        """Test csharp keyword escaped with at"""
        # Only a lone lowercase letter survives casing unchanged
        self.assertEqual(CSHARP.escape("class"), "@class")
        self.assertEqual(to_identifier(["class"]), "Class")

    def test_python_keyword_escaped_with_suffix(self):
        """Test python keyword escaped with suffix"""
        self.assertEqual(clean_identifier("TRUE", PYTHON), "True_")
        self.assertEqual(clean_identifier("none", PYTHON), "None_")
        self.assertEqual(clean_identifier("none", CSHARP), "None")


class TestStripIdSuffix(TestCase):
    """Test cases for strip_id_suffix"""

    def test_strips_id_case_insensitively(self):
        """Test strips id case insensitively"""
        self.assertEqual(strip_id_suffix("ShipToAddressTypeID"), "ShipToAddressType")
        self.assertEqual(strip_id_suffix("customer_id"), "customer_")
        self.assertEqual(strip_id_suffix("OwnerId"), "Owner")

    def test_bare_id_is_kept(self):
        """Test bare id is kept"""
        self.assertEqual(strip_id_suffix("ID"), "ID")

    def test_suffix_match_ignores_word_boundaries(self):
        """Test suffix match ignores word boundaries"""
        self.assertEqual(strip_id_suffix("Paid"), "Pa")

    def test_other_names_untouched(self):
        """Test other names untouched"""
        self.assertEqual(strip_id_suffix("Manager"), "Manager")


class TestGenerateClassName(TestCase):
    """Test cases for generate_class_name"""

    def test_table_name_verbatim(self):
        """Test table name verbatim"""
        self.assertEqual(generate_class_name("Sales", "Customer", False, "dbo"), "Customer")

    def test_schema_qualified_outside_default_schema(self):
        """Test schema qualified outside default schema"""
        self.assertEqual(generate_class_name("Sales", "Customer", True, "dbo"), "Sales_Customer")

    def test_default_schema_never_qualified(self):
        """Test default schema never qualified"""
        self.assertEqual(generate_class_name("dbo", "Customer", True, "dbo"), "Customer")


class TestNamingConventions(TestCase):
    """Test cases for NamingConventions"""

    def setUp(self):
        self.conventions = NamingConventions(CSHARP)

    def test_column_to_property(self):
        """Test column to property"""
        self.assertEqual(self.conventions.column_to_property("ModifiedDate"), "ModifiedDate")

    def test_foreign_key_to_navigation(self):
        """Test foreign key to navigation"""
        self.assertEqual(
            self.conventions.foreign_key_to_navigation("BillToAddressTypeID"),
            "BillToAddressType",
        )
        self.assertEqual(self.conventions.foreign_key_to_navigation("customer_id"), "customer_")

    def test_foreign_key_navigation_keeps_acronyms(self):
        """Test navigation names keep the casing of the foreign-key column"""
        self.assertEqual(self.conventions.foreign_key_to_navigation("ParentSKUID"), "ParentSKU")
        self.assertEqual(self.conventions.foreign_key_to_navigation("Bill To ID"), "Bill_To_")
        self.assertEqual(self.conventions.foreign_key_to_navigation("2ndOwnerID"), "_2ndOwner")

    def test_foreign_key_navigation_escapes_keywords(self):
        """Test navigation names that are keywords get escaped"""
        self.assertEqual(self.conventions.foreign_key_to_navigation("classID"), "@class")
        self.assertEqual(
            NamingConventions(PYTHON).foreign_key_to_navigation("NoneID"), "None_"
        )

    def test_reverse_navigation_is_child_class_name(self):
        """Test reverse navigation is child class name"""
        self.assertEqual(self.conventions.class_to_reverse_navigation("Person"), "Person")
        self.assertEqual(self.conventions.class_to_reverse_navigation("event"), "@event")
