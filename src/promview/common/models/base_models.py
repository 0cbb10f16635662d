# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class PromViewBaseModel(BaseModel):
    """Base model for all promview data models.

    Non-finite floats are allowed since NaN is a valid sample value.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        allow_inf_nan=True,
        populate_by_name=True,
    )
