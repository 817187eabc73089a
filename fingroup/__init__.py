#!/usr/bin/env python3

from fingroup.errors import (GroupError, StructureError, PreconditionError,
    SizeLimitError, ConsistencyError)
from fingroup.closure import mulclose, mulclose_hom
from fingroup.group import Group, Subgroup, Operation
from fingroup.perm import Perm
from fingroup.construct import (GenerationStrategy, STRATEGIES, get_group,
    cyclic, dihedral, symmetric, alternating, quaternion, klein,
    elementary_abelian, direct_product)
from fingroup.subgroups import (all_subgroups, maximal_subgroups,
    frattini_subgroup, cyclic_subgroups)
from fingroup.structure import (is_normal, normalizer, centralizer, center,
    commutator_subgroup, normal_subgroups)
from fingroup.conjugacy import ConjugacyClass, conjugacy_classes, class_equation
from fingroup.hom import Hom
from fingroup.quotient import Coset, QuotientGroup, left_cosets, right_cosets
from fingroup.cayley import CayleyPermutationGroup, cayley_table
from fingroup.action import Action
from fingroup.verify import verify

