# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Evaluation of the keyword validators of a schema node against an instance."""

import logging
from typing import Any, Optional

from .context import ValidationContext
from .keyword.factory import ValidatorFactory
from .metaschema import MetaSchema, default_metaschema
from .report import ValidationReport

logger = logging.getLogger(__name__)


class SchemaValidator:
    """Validates instances against schema nodes of one metaschema.

    The schema is expected to be syntactically valid already. Validators
    run in keyword order; evaluation stops at the first fatal message.
    """

    def __init__(self, metaschema: Optional[MetaSchema] = None):
        self.metaschema = metaschema or default_metaschema()
        self.factory = ValidatorFactory.from_metaschema(self.metaschema)

    def validate(
        self,
        schema: Any,
        instance: Any,
        report: Optional[ValidationReport] = None,
        context: Optional[ValidationContext] = None,
    ) -> ValidationReport:
        report = report if report is not None else ValidationReport()
        context = context or ValidationContext(self.factory)

        validators = sorted(context.validators_for(schema), key=lambda v: v.keyword)
        logger.debug(
            f"Validating {context.instance_path or '/'} with keywords {[v.keyword for v in validators]}"
        )

        for validator in validators:
            validator.validate_instance(context, report, instance)
            if report.is_fatal():
                logger.debug(f"Fatal message from '{validator.keyword}', stopping validation")
                break

        return report
