"""Allure reporting helpers."""
