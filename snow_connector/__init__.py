"""Centreon Broker event filtering and ServiceNow alert classification."""
