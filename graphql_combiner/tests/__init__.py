# Copyright 2026-present Kensho Technologies, LLC.
