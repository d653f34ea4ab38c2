from unimodal_opt.drivers.optimizers.errors import (InvalidBracket, InvalidIterationLimit,
                                                   InvalidTolerance, SearchInputError)
from unimodal_opt.drivers.optimizers.golden_section import golden_section, golden_section_search
