# Copyright 2026 Google LLC
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
#
# SPDX-License-Identifier: Apache-2.0

r"""The SPDX license catalog: one closed enumeration, four parallel tables.

Every license is declared exactly once, as a member of
:class:`SpdxLicense`.  Each member's value is its **ordinal**, the
zero-based position of the declaration.  The attribute tables
(:data:`ID`, :data:`NAME`, :data:`LIBRE`, :data:`OSI`) are built from
those same declarations, so table ``i`` always describes ordinal ``i``.

Key Concepts (ELI5)::

    ┌─────────────────────┬──────────────────────────────────────────────┐
    │ Concept             │ Plain-English                                │
    ├─────────────────────┼──────────────────────────────────────────────┤
    │ Ordinal             │ Where the license sits in the declaration.  │
    │                     │ Used directly as a table index.             │
    ├─────────────────────┼──────────────────────────────────────────────┤
    │ Identifier          │ The short SPDX id (``MIT``). Unique; the    │
    │                     │ key for :func:`parse`.                      │
    ├─────────────────────┼──────────────────────────────────────────────┤
    │ Family              │ A run of adjacent declarations (all GPLs,   │
    │                     │ all AGPLs, all Creative Commons). Checked   │
    │                     │ with two integer comparisons.               │
    └─────────────────────┴──────────────────────────────────────────────┘

Usage::

    from linfo.spdx import SpdxLicense, parse

    lic = parse('GPL-3.0-only')
    assert lic is SpdxLicense.GPL_3_0_ONLY
    assert lic.is_gpl and lic.is_osi_approved
    assert str(lic) == 'GPL-3.0-only'

The list is based on version 3.7 of the SPDX license list (2019-10-22).
Members may be added or reordered between releases; do not persist
ordinals, persist identifiers.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from linfo.errors import EmptyLicenseIdError, UnknownLicenseIdError

__all__ = [
    'AGPL',
    'COUNT',
    'CREATIVE_COMMONS',
    'FAMILIES',
    'GPL',
    'ID',
    'LIBRE',
    'LicenseFamily',
    'NAME',
    'OSI',
    'SpdxLicense',
    'parse',
    'try_parse',
]

# Filled by ``SpdxLicense.__new__`` while the class body runs, one row
# per member in declaration order.
_DECLARED: list[tuple[str, str, bool, bool]] = []


class SpdxLicense(enum.Enum):
    """A commonly found license listed at https://spdx.org/licenses.

    Members are declared as ``(identifier, display name, libre, osi)``
    tuples.  The member value is the ordinal, so ``SpdxLicense(i)``
    returns the license declared at position ``i``.

    Converting a member to text yields its identifier, and
    ``parse(str(lic)) is lic`` holds for every member.
    """

    def __new__(cls, identifier: str, display_name: str, libre: bool, osi: bool) -> SpdxLicense:
        member = object.__new__(cls)
        member._value_ = len(_DECLARED)
        _DECLARED.append((identifier, display_name, libre, osi))
        return member

    # Identifier kept with its no-break space, as listed.
    BSD_0 = ('BSD\u00a00', 'BSD Zero Clause License', False, True)
    AAL = ('AAL', 'Attribution Assurance License', False, True)
    ABSTYLES = ('Abstyles', 'Abstyles License', False, False)
    ADOBE_2006 = ('Adobe-2006', 'Adobe Systems Incorporated Source Code License Agreement', False, False)
    ADOBE_GLYPH = ('Adobe-Glyph', 'Adobe Glyph List License', False, False)
    ADSL = ('ADSL', 'Amazon Digital Services License', False, False)
    AFL_1_1 = ('AFL-1.1', 'Academic Free License v1.1', True, True)
    AFL_1_2 = ('AFL-1.2', 'Academic Free License v1.2', True, True)
    AFL_2_0 = ('AFL-2.0', 'Academic Free License v2.0', True, True)
    AFL_2_1 = ('AFL-2.1', 'Academic Free License v2.1', True, True)
    AFL_3_0 = ('AFL-3.0', 'Academic Free License v3.0', True, True)
    AFMPARSE = ('Afmparse', 'Afmparse License', False, False)
    # Start of the Affero GPL span read by `is_agpl`. The family must stay
    # contiguous: declare nothing else between AGPL_1_0_ONLY and
    # AGPL_3_0_OR_LATER.
    AGPL_1_0_ONLY = ('AGPL-1.0-only', 'Affero General Public License v1.0 only', False, False)
    AGPL_1_0_OR_LATER = ('AGPL-1.0-or-later', 'Affero General Public License v1.0 or later', False, False)
    AGPL_3_0_ONLY = ('AGPL-3.0-only', 'GNU Affero General Public License v3.0 only', True, True)
    # End of the Affero GPL span.
    AGPL_3_0_OR_LATER = ('AGPL-3.0-or-later', 'GNU Affero General Public License v3.0 or later', True, True)
    ALADDIN = ('Aladdin', 'Aladdin Free Public License', False, False)
    AMDPLPA = ('AMDPLPA', "AMD's plpa_map.c License", False, False)
    AML = ('AML', 'Apple MIT License', False, False)
    AMPAS = ('AMPAS', 'Academy of Motion Picture Arts and Sciences BSD', False, False)
    ANTLR_PD = ('ANTLR-PD', 'ANTLR Software Rights Notice', False, False)
    APACHE_1_0 = ('Apache-1.0', 'Apache License 1.0', True, False)
    APACHE_1_1 = ('Apache-1.1', 'Apache License 1.1', True, True)
    APACHE_2_0 = ('Apache-2.0', 'Apache License 2.0', True, True)
    APAFML = ('APAFML', 'Adobe Postscript AFM License', False, False)
    APL_1_0 = ('APL-1.0', 'Adaptive Public License 1.0', False, True)
    APSL_1_0 = ('APSL-1.0', 'Apple Public Source License 1.0', False, True)
    APSL_1_1 = ('APSL-1.1', 'Apple Public Source License 1.1', False, True)
    APSL_1_2 = ('APSL-1.2', 'Apple Public Source License 1.2', False, True)
    APSL_2_0 = ('APSL-2.0', 'Apple Public Source License 2.0', True, True)
    ARTISTIC_1_0 = ('Artistic-1.0', 'Artistic License 1.0', False, True)
    ARTISTIC_1_0_CL8 = ('Artistic-1.0-cl8', 'Artistic License 1.0 w/clause 8', False, True)
    ARTISTIC_1_0_PERL = ('Artistic-1.0-Perl', 'Artistic License 1.0 (Perl)', False, True)
    ARTISTIC_2_0 = ('Artistic-2.0', 'Artistic License 2.0', True, True)
    BAHYPH = ('Bahyph', 'Bahyph License', False, False)
    BARR = ('Barr', 'Barr License', False, False)
    BEERWARE = ('Beerware', 'Beerware License', False, False)
    BITTORRENT_1_0 = ('BitTorrent-1.0', 'BitTorrent Open Source License v1.0', False, False)
    BITTORRENT_1_1 = ('BitTorrent-1.1', 'BitTorrent Open Source License v1.1', True, False)
    BLESSING = ('blessing', 'SQLite Blessing', False, False)
    BLUEOAK_1_0_0 = ('BlueOak-1.0.0', 'Blue Oak Model License 1.0.0', False, False)
    BORCEUX = ('Borceux', 'Borceux license', False, False)
    BSD_1_CLAUSE = ('BSD-1-Clause', 'BSD 1-Clause License', False, False)
    BSD_2_CLAUSE = ('BSD-2-Clause', 'BSD 2-Clause "Simplified" License', False, True)
    BSD_2_CLAUSE_FREEBSD = ('BSD-2-Clause-FreeBSD', 'BSD 2-Clause FreeBSD License', True, False)
    BSD_2_CLAUSE_NETBSD = ('BSD-2-Clause-NetBSD', 'BSD 2-Clause NetBSD License', False, False)
    BSD_2_CLAUSE_PATENT = ('BSD-2-Clause-Patent', 'BSD-2-Clause Plus Patent License', False, True)
    BSD_3_CLAUSE = ('BSD-3-Clause', 'BSD 3-Clause "New" or "Revised" License', True, True)
    BSD_3_CLAUSE_ATTRIBUTION = ('BSD-3-Clause-Attribution', 'BSD with attribution', False, False)
    BSD_3_CLAUSE_CLEAR = ('BSD-3-Clause-Clear', 'BSD 3-Clause Clear License', True, False)
    BSD_3_CLAUSE_LBNL = ('BSD-3-Clause-LBNL', 'Lawrence Berkeley National Labs BSD variant license', False, True)
    BSD_3_CLAUSE_NO_NUCLEAR_LICENSE = ('BSD-3-Clause-No-Nuclear-License', 'BSD 3-Clause No Nuclear License', False, False)
    BSD_3_CLAUSE_NO_NUCLEAR_LICENSE_2014 = ('BSD-3-Clause-No-Nuclear-License-2014', 'BSD 3-Clause No Nuclear License 2014', False, False)
    BSD_3_CLAUSE_NO_NUCLEAR_WARRANTY = ('BSD-3-Clause-No-Nuclear-Warranty', 'BSD 3-Clause No Nuclear Warranty', False, False)
    BSD_3_CLAUSE_OPEN_MPI = ('BSD-3-Clause-Open-MPI', 'BSD 3-Clause Open MPI variant', False, False)
    BSD_4_CLAUSE = ('BSD-4-Clause', 'BSD 4-Clause "Original" or "Old" License', True, False)
    BSD_4_CLAUSE_UC = ('BSD-4-Clause-UC', 'BSD-4-Clause (University of California-Specific)', False, False)
    BSD_PROTECTION = ('BSD-Protection', 'BSD Protection License', False, False)
    BSD_SOURCE_CODE = ('BSD-Source-Code', 'BSD Source Code Attribution', False, False)
    BSL_1_0 = ('BSL-1.0', 'Boost Software License 1.0', True, True)
    BZIP2_1_0_5 = ('bzip2-1.0.5', 'bzip2 and libbzip2 License v1.0.5', False, False)
    BZIP2_1_0_6 = ('bzip2-1.0.6', 'bzip2 and libbzip2 License v1.0.6', False, False)
    CALDERA = ('Caldera', 'Caldera License', False, False)
    CATOSL_1_1 = ('CATOSL-1.1', 'Computer Associates Trusted Open Source License 1.1', False, True)
    # Start of the Creative Commons span read by `is_creative_commons`. Every
    # CC license goes between CC_BY_1_0 and CC0_1_0.
    CC_BY_1_0 = ('CC-BY-1.0', 'Creative Commons Attribution 1.0 Generic', False, False)
    CC_BY_2_0 = ('CC-BY-2.0', 'Creative Commons Attribution 2.0 Generic', False, False)
    CC_BY_2_5 = ('CC-BY-2.5', 'Creative Commons Attribution 2.5 Generic', False, False)
    CC_BY_3_0 = ('CC-BY-3.0', 'Creative Commons Attribution 3.0 Unported', False, False)
    CC_BY_4_0 = ('CC-BY-4.0', 'Creative Commons Attribution 4.0 International', True, False)
    CC_BY_NC_1_0 = ('CC-BY-NC-1.0', 'Creative Commons Attribution Non Commercial 1.0 Generic', False, False)
    CC_BY_NC_2_0 = ('CC-BY-NC-2.0', 'Creative Commons Attribution Non Commercial 2.0 Generic', False, False)
    CC_BY_NC_2_5 = ('CC-BY-NC-2.5', 'Creative Commons Attribution Non Commercial 2.5 Generic', False, False)
    CC_BY_NC_3_0 = ('CC-BY-NC-3.0', 'Creative Commons Attribution Non Commercial 3.0 Unported', False, False)
    CC_BY_NC_4_0 = ('CC-BY-NC-4.0', 'Creative Commons Attribution Non Commercial 4.0 International', False, False)
    CC_BY_NC_ND_1_0 = ('CC-BY-NC-ND-1.0', 'Creative Commons Attribution Non Commercial No Derivatives 1.0 Generic', False, False)
    CC_BY_NC_ND_2_0 = ('CC-BY-NC-ND-2.0', 'Creative Commons Attribution Non Commercial No Derivatives 2.0 Generic', False, False)
    CC_BY_NC_ND_2_5 = ('CC-BY-NC-ND-2.5', 'Creative Commons Attribution Non Commercial No Derivatives 2.5 Generic', False, False)
    CC_BY_NC_ND_3_0 = ('CC-BY-NC-ND-3.0', 'Creative Commons Attribution Non Commercial No Derivatives 3.0 Unported', False, False)
    CC_BY_NC_ND_4_0 = ('CC-BY-NC-ND-4.0', 'Creative Commons Attribution Non Commercial No Derivatives 4.0 International', False, False)
    CC_BY_NC_SA_1_0 = ('CC-BY-NC-SA-1.0', 'Creative Commons Attribution Non Commercial Share Alike 1.0 Generic', False, False)
    CC_BY_NC_SA_2_0 = ('CC-BY-NC-SA-2.0', 'Creative Commons Attribution Non Commercial Share Alike 2.0 Generic', False, False)
    CC_BY_NC_SA_2_5 = ('CC-BY-NC-SA-2.5', 'Creative Commons Attribution Non Commercial Share Alike 2.5 Generic', False, False)
    CC_BY_NC_SA_3_0 = ('CC-BY-NC-SA-3.0', 'Creative Commons Attribution Non Commercial Share Alike 3.0 Unported', False, False)
    CC_BY_NC_SA_4_0 = ('CC-BY-NC-SA-4.0', 'Creative Commons Attribution Non Commercial Share Alike 4.0 International', False, False)
    CC_BY_ND_1_0 = ('CC-BY-ND-1.0', 'Creative Commons Attribution No Derivatives 1.0 Generic', False, False)
    CC_BY_ND_2_0 = ('CC-BY-ND-2.0', 'Creative Commons Attribution No Derivatives 2.0 Generic', False, False)
    CC_BY_ND_2_5 = ('CC-BY-ND-2.5', 'Creative Commons Attribution No Derivatives 2.5 Generic', False, False)
    CC_BY_ND_3_0 = ('CC-BY-ND-3.0', 'Creative Commons Attribution No Derivatives 3.0 Unported', False, False)
    CC_BY_ND_4_0 = ('CC-BY-ND-4.0', 'Creative Commons Attribution No Derivatives 4.0 International', False, False)
    CC_BY_SA_1_0 = ('CC-BY-SA-1.0', 'Creative Commons Attribution Share Alike 1.0 Generic', False, False)
    CC_BY_SA_2_0 = ('CC-BY-SA-2.0', 'Creative Commons Attribution Share Alike 2.0 Generic', False, False)
    CC_BY_SA_2_5 = ('CC-BY-SA-2.5', 'Creative Commons Attribution Share Alike 2.5 Generic', False, False)
    CC_BY_SA_3_0 = ('CC-BY-SA-3.0', 'Creative Commons Attribution Share Alike 3.0 Unported', False, False)
    CC_BY_SA_4_0 = ('CC-BY-SA-4.0', 'Creative Commons Attribution Share Alike 4.0 International', True, False)
    CC_PDDC = ('CC-PDDC', 'Creative Commons Public Domain Dedication and Certification', False, False)
    # End of the Creative Commons span.
    CC0_1_0 = ('CC0-1.0', 'Creative Commons Zero v1.0 Universal', True, False)
    CDDL_1_0 = ('CDDL-1.0', 'Common Development and Distribution License 1.0', True, True)
    CDDL_1_1 = ('CDDL-1.1', 'Common Development and Distribution License 1.1', False, False)
    CDLA_PERMISSIVE_1_0 = ('CDLA-Permissive-1.0', 'Community Data License Agreement Permissive 1.0', False, False)
    CDLA_SHARING_1_0 = ('CDLA-Sharing-1.0', 'Community Data License Agreement Sharing 1.0', False, False)
    CECILL_1_0 = ('CECILL-1.0', 'CeCILL Free Software License Agreement v1.0', False, False)
    CECILL_1_1 = ('CECILL-1.1', 'CeCILL Free Software License Agreement v1.1', False, False)
    CECILL_2_0 = ('CECILL-2.0', 'CeCILL Free Software License Agreement v2.0', True, False)
    CECILL_2_1 = ('CECILL-2.1', 'CeCILL Free Software License Agreement v2.1', False, True)
    CECILL_B = ('CECILL-B', 'CeCILL-B Free Software License Agreement', True, False)
    CECILL_C = ('CECILL-C', 'CeCILL-C Free Software License Agreement', True, False)
    CERN_OHL_1_1 = ('CERN-OHL-1.1', 'CERN Open Hardware Licence v1.1', False, False)
    CERN_OHL_1_2 = ('CERN-OHL-1.2', 'CERN Open Hardware Licence v1.2', False, False)
    CLARTISTIC = ('ClArtistic', 'Clarified Artistic License', True, False)
    CNRI_JYTHON = ('CNRI-Jython', 'CNRI Jython License', False, False)
    CNRI_PYTHON = ('CNRI-Python', 'CNRI Python License', False, True)
    CNRI_PYTHON_GPL_COMPATIBLE = ('CNRI-Python-GPL-Compatible', 'CNRI Python Open Source GPL Compatible License Agreement', False, False)
    CONDOR_1_1 = ('Condor-1.1', 'Condor Public License v1.1', True, False)
    COPYLEFT_NEXT_0_3_0 = ('copyleft-next-0.3.0', 'copyleft-next 0.3.0', False, False)
    COPYLEFT_NEXT_0_3_1 = ('copyleft-next-0.3.1', 'copyleft-next 0.3.1', False, False)
    CPAL_1_0 = ('CPAL-1.0', 'Common Public Attribution License 1.0', True, True)
    CPL_1_0 = ('CPL-1.0', 'Common Public License 1.0', True, True)
    CPOL_1_02 = ('CPOL-1.02', 'Code Project Open License 1.02', False, False)
    CROSSWORD = ('Crossword', 'Crossword License', False, False)
    CRYSTALSTACKER = ('CrystalStacker', 'CrystalStacker License', False, False)
    CUA_OPL_1_0 = ('CUA-OPL-1.0', 'CUA Office Public License v1.0', False, True)
    CUBE = ('Cube', 'Cube License', False, False)
    CURL = ('curl', 'curl License', False, False)
    D_FSL_1_0 = ('D-FSL-1.0', 'Deutsche Freie Software Lizenz', False, False)
    DIFFMARK = ('diffmark', 'diffmark license', False, False)
    DOC = ('DOC', 'DOC License', False, False)
    DOTSEQN = ('Dotseqn', 'Dotseqn License', False, False)
    DSDP = ('DSDP', 'DSDP License', False, False)
    DVIPDFM = ('dvipdfm', 'dvipdfm License', False, False)
    ECL_1_0 = ('ECL-1.0', 'Educational Community License v1.0', False, True)
    ECL_2_0 = ('ECL-2.0', 'Educational Community License v2.0', True, True)
    EFL_1_0 = ('EFL-1.0', 'Eiffel Forum License v1.0', False, True)
    EFL_2_0 = ('EFL-2.0', 'Eiffel Forum License v2.0', True, True)
    EGENIX = ('eGenix', 'eGenix.com Public License 1.1.0', False, False)
    ENTESSA = ('Entessa', 'Entessa Public License v1.0', False, True)
    EPL_1_0 = ('EPL-1.0', 'Eclipse Public License 1.0', True, True)
    EPL_2_0 = ('EPL-2.0', 'Eclipse Public License 2.0', True, True)
    ERLPL_1_1 = ('ErlPL-1.1', 'Erlang Public License v1.1', False, False)
    ETALAB_2_0 = ('etalab-2.0', 'Etalab Open License 2.0', False, False)
    EUDATAGRID = ('EUDatagrid', 'EU DataGrid Software License', True, True)
    EUPL_1_0 = ('EUPL-1.0', 'European Union Public License 1.0', False, False)
    EUPL_1_1 = ('EUPL-1.1', 'European Union Public License 1.1', True, True)
    EUPL_1_2 = ('EUPL-1.2', 'European Union Public License 1.2', True, True)
    EUROSYM = ('Eurosym', 'Eurosym License', False, False)
    FAIR = ('Fair', 'Fair License', False, True)
    FRAMEWORX_1_0 = ('Frameworx-1.0', 'Frameworx Open License 1.0', False, True)
    FREEIMAGE = ('FreeImage', 'FreeImage Public License v1.0', False, False)
    FSFAP = ('FSFAP', 'FSF All Permissive License', True, False)
    FSFUL = ('FSFUL', 'FSF Unlimited License', False, False)
    FSFULLR = ('FSFULLR', 'FSF Unlimited License (with License Retention)', False, False)
    FTL = ('FTL', 'Freetype Project License', True, False)
    GFDL_1_1_ONLY = ('GFDL-1.1-only', 'GNU Free Documentation License v1.1 only', True, False)
    GFDL_1_1_OR_LATER = ('GFDL-1.1-or-later', 'GNU Free Documentation License v1.1 or later', True, False)
    GFDL_1_2_ONLY = ('GFDL-1.2-only', 'GNU Free Documentation License v1.2 only', True, False)
    GFDL_1_2_OR_LATER = ('GFDL-1.2-or-later', 'GNU Free Documentation License v1.2 or later', True, False)
    GFDL_1_3_ONLY = ('GFDL-1.3-only', 'GNU Free Documentation License v1.3 only', True, False)
    GFDL_1_3_OR_LATER = ('GFDL-1.3-or-later', 'GNU Free Documentation License v1.3 or later', True, False)
    GIFTWARE = ('Giftware', 'Giftware License', False, False)
    GL2PS = ('GL2PS', 'GL2PS License', False, False)
    GLIDE = ('Glide', '3dfx Glide License', False, False)
    GLULXE = ('Glulxe', 'Glulxe License', False, False)
    GNUPLOT = ('gnuplot', 'gnuplot License', True, False)
    # Start of the GNU GPL span read by `is_gpl`. LGPL and AGPL are separate
    # families and must not be declared between GPL_1_0_ONLY and
    # GPL_3_0_OR_LATER.
    GPL_1_0_ONLY = ('GPL-1.0-only', 'GNU General Public License v1.0 only', False, False)
    GPL_1_0_OR_LATER = ('GPL-1.0-or-later', 'GNU General Public License v1.0 or later', False, False)
    GPL_2_0_ONLY = ('GPL-2.0-only', 'GNU General Public License v2.0 only', True, True)
    GPL_2_0_OR_LATER = ('GPL-2.0-or-later', 'GNU General Public License v2.0 or later', True, True)
    GPL_3_0_ONLY = ('GPL-3.0-only', 'GNU General Public License v3.0 only', True, True)
    # End of the GNU GPL span.
    GPL_3_0_OR_LATER = ('GPL-3.0-or-later', 'GNU General Public License v3.0 or later', True, True)
    GSOAP_1_3B = ('gSOAP-1.3b', 'gSOAP Public License v1.3b', False, False)
    HASKELLREPORT = ('HaskellReport', 'Haskell Language Report License', False, False)
    HPND = ('HPND', 'Historical Permission Notice and Disclaimer', True, True)
    HPND_SELL_VARIANT = ('HPND-sell-variant', 'Historical Permission Notice and Disclaimer - sell variant', False, False)
    IBM_PIBS = ('IBM-pibs', 'IBM PowerPC Initialization and Boot Software', False, False)
    ICU = ('ICU', 'ICU License', False, False)
    IJG = ('IJG', 'Independent JPEG Group License', True, False)
    IMAGEMAGICK = ('ImageMagick', 'ImageMagick License', False, False)
    IMATIX = ('iMatix', 'iMatix Standard Function Library Agreement', True, False)
    IMLIB2 = ('Imlib2', 'Imlib2 License', True, False)
    INFO_ZIP = ('Info-ZIP', 'Info-ZIP License', False, False)
    INTEL = ('Intel', 'Intel Open Source License', True, True)
    INTEL_ACPI = ('Intel-ACPI', 'Intel ACPI Software License Agreement', False, False)
    INTERBASE_1_0 = ('Interbase-1.0', 'Interbase Public License v1.0', False, False)
    IPA = ('IPA', 'IPA Font License', True, True)
    IPL_1_0 = ('IPL-1.0', 'IBM Public License v1.0', True, True)
    ISC = ('ISC', 'ISC License', True, True)
    JASPER_2_0 = ('JasPer-2.0', 'JasPer License', False, False)
    JPNIC = ('JPNIC', 'Japan Network Information Center License', False, False)
    JSON = ('JSON', 'JSON License', False, False)
    LAL_1_2 = ('LAL-1.2', 'Licence Art Libre 1.2', False, False)
    LAL_1_3 = ('LAL-1.3', 'Licence Art Libre 1.3', False, False)
    LATEX2E = ('Latex2e', 'Latex2e License', False, False)
    LEPTONICA = ('Leptonica', 'Leptonica License', False, False)
    LGPL_2_0_ONLY = ('LGPL-2.0-only', 'GNU Library General Public License v2 only', False, True)
    LGPL_2_0_OR_LATER = ('LGPL-2.0-or-later', 'GNU Library General Public License v2 or later', False, True)
    LGPL_2_1_ONLY = ('LGPL-2.1-only', 'GNU Lesser General Public License v2.1 only', True, True)
    LGPL_2_1_OR_LATER = ('LGPL-2.1-or-later', 'GNU Lesser General Public License v2.1 or later', True, True)
    LGPL_3_0_ONLY = ('LGPL-3.0-only', 'GNU Lesser General Public License v3.0 only', True, True)
    LGPL_3_0_OR_LATER = ('LGPL-3.0-or-later', 'GNU Lesser General Public License v3.0 or later', True, True)
    LGPLLR = ('LGPLLR', 'Lesser General Public License For Linguistic Resources', False, False)
    LIBPNG = ('Libpng', 'libpng License', False, False)
    LIBPNG_2_0 = ('libpng-2.0', 'PNG Reference Library version 2', False, False)
    LIBTIFF = ('libtiff', 'libtiff License', False, False)
    LILIQ_P_1_1 = ('LiLiQ-P-1.1', 'Licence Libre du Québec – Permissive version 1.1', False, True)
    LILIQ_R_1_1 = ('LiLiQ-R-1.1', 'Licence Libre du Québec – Réciprocité version 1.1', False, True)
    LILIQ_RPLUS_1_1 = ('LiLiQ-Rplus-1.1', 'Licence Libre du Québec – Réciprocité forte version 1.1', False, True)
    LINUX_OPENIB = ('Linux-OpenIB', 'Linux Kernel Variant of OpenIB.org license', False, False)
    LPL_1_0 = ('LPL-1.0', 'Lucent Public License Version 1.0', False, True)
    LPL_1_02 = ('LPL-1.02', 'Lucent Public License v1.02', True, True)
    LPPL_1_0 = ('LPPL-1.0', 'LaTeX Project Public License v1.0', False, False)
    LPPL_1_1 = ('LPPL-1.1', 'LaTeX Project Public License v1.1', False, False)
    LPPL_1_2 = ('LPPL-1.2', 'LaTeX Project Public License v1.2', True, False)
    LPPL_1_3A = ('LPPL-1.3a', 'LaTeX Project Public License v1.3a', True, False)
    LPPL_1_3C = ('LPPL-1.3c', 'LaTeX Project Public License v1.3c', False, True)
    MAKEINDEX = ('MakeIndex', 'MakeIndex License', False, False)
    MIROS = ('MirOS', 'The MirOS Licence', False, True)
    MIT = ('MIT', 'MIT License', True, True)
    MIT_0 = ('MIT-0', 'MIT No Attribution', False, True)
    MIT_ADVERTISING = ('MIT-advertising', 'Enlightenment License (e16)', False, False)
    MIT_CMU = ('MIT-CMU', 'CMU License', False, False)
    MIT_ENNA = ('MIT-enna', 'enna License', False, False)
    MIT_FEH = ('MIT-feh', 'feh License', False, False)
    MITNFA = ('MITNFA', 'MIT +no-false-attribs license', False, False)
    MOTOSOTO = ('Motosoto', 'Motosoto License', False, True)
    MPICH2 = ('mpich2', 'mpich2 License', False, False)
    MPL_1_0 = ('MPL-1.0', 'Mozilla Public License 1.0', False, True)
    MPL_1_1 = ('MPL-1.1', 'Mozilla Public License 1.1', True, True)
    MPL_2_0 = ('MPL-2.0', 'Mozilla Public License 2.0', True, True)
    MPL_2_0_NO_COPYLEFT_EXCEPTION = ('MPL-2.0-no-copyleft-exception', 'Mozilla Public License 2.0 (no copyleft exception)', False, True)
    MS_PL = ('MS-PL', 'Microsoft Public License', True, True)
    MS_RL = ('MS-RL', 'Microsoft Reciprocal License', True, True)
    MTLL = ('MTLL', 'Matrix Template Library License', False, False)
    MULANPSL_1_0 = ('MulanPSL-1.0', 'Mulan Permissive Software License, Version 1', False, False)
    MULTICS = ('Multics', 'Multics License', False, True)
    MUP = ('Mup', 'Mup License', False, False)
    NASA_1_3 = ('NASA-1.3', 'NASA Open Source Agreement 1.3', False, True)
    NAUMEN = ('Naumen', 'Naumen Public License', False, True)
    NBPL_1_0 = ('NBPL-1.0', 'Net Boolean Public License v1', False, False)
    NCSA = ('NCSA', 'University of Illinois/NCSA Open Source License', True, True)
    NET_SNMP = ('Net-SNMP', 'Net-SNMP License', False, False)
    NETCDF = ('NetCDF', 'NetCDF license', False, False)
    NEWSLETR = ('Newsletr', 'Newsletr License', False, False)
    NGPL = ('NGPL', 'Nethack General Public License', False, True)
    NLOD_1_0 = ('NLOD-1.0', 'Norwegian Licence for Open Government Data', False, False)
    NLPL = ('NLPL', 'No Limit Public License', False, False)
    NOKIA = ('Nokia', 'Nokia Open Source License', True, True)
    NOSL = ('NOSL', 'Netizen Open Source License', True, False)
    NOWEB = ('Noweb', 'Noweb License', False, False)
    NPL_1_0 = ('NPL-1.0', 'Netscape Public License v1.0', True, False)
    NPL_1_1 = ('NPL-1.1', 'Netscape Public License v1.1', True, False)
    NPOSL_3_0 = ('NPOSL-3.0', 'Non-Profit Open Software License 3.0', False, True)
    NRL = ('NRL', 'NRL License', False, False)
    NTP = ('NTP', 'NTP License', False, True)
    OCCT_PL = ('OCCT-PL', 'Open CASCADE Technology Public License', False, False)
    OCLC_2_0 = ('OCLC-2.0', 'OCLC Research Public License 2.0', False, True)
    ODBL_1_0 = ('ODbL-1.0', 'ODC Open Database License v1.0', True, False)
    ODC_BY_1_0 = ('ODC-By-1.0', 'Open Data Commons Attribution License v1.0', False, False)
    OFL_1_0 = ('OFL-1.0', 'SIL Open Font License 1.0', True, False)
    OFL_1_1 = ('OFL-1.1', 'SIL Open Font License 1.1', True, True)
    OGL_CANADA_2_0 = ('OGL-Canada-2.0', 'Open Government Licence - Canada', False, False)
    OGL_UK_1_0 = ('OGL-UK-1.0', 'Open Government Licence v1.0', False, False)
    OGL_UK_2_0 = ('OGL-UK-2.0', 'Open Government Licence v2.0', False, False)
    OGL_UK_3_0 = ('OGL-UK-3.0', 'Open Government Licence v3.0', False, False)
    OGTSL = ('OGTSL', 'Open Group Test Suite License', False, True)
    OLDAP_1_1 = ('OLDAP-1.1', 'Open LDAP Public License v1.1', False, False)
    OLDAP_1_2 = ('OLDAP-1.2', 'Open LDAP Public License v1.2', False, False)
    OLDAP_1_3 = ('OLDAP-1.3', 'Open LDAP Public License v1.3', False, False)
    OLDAP_1_4 = ('OLDAP-1.4', 'Open LDAP Public License v1.4', False, False)
    OLDAP_2_0 = ('OLDAP-2.0', 'Open LDAP Public License v2.0 (or possibly 2.0A and 2.0B)', False, False)
    OLDAP_2_0_1 = ('OLDAP-2.0.1', 'Open LDAP Public License v2.0.1', False, False)
    OLDAP_2_1 = ('OLDAP-2.1', 'Open LDAP Public License v2.1', False, False)
    OLDAP_2_2 = ('OLDAP-2.2', 'Open LDAP Public License v2.2', False, False)
    OLDAP_2_2_1 = ('OLDAP-2.2.1', 'Open LDAP Public License v2.2.1', False, False)
    OLDAP_2_2_2 = ('OLDAP-2.2.2', 'Open LDAP Public License 2.2.2', False, False)
    OLDAP_2_3 = ('OLDAP-2.3', 'Open LDAP Public License v2.3', True, False)
    OLDAP_2_4 = ('OLDAP-2.4', 'Open LDAP Public License v2.4', False, False)
    OLDAP_2_5 = ('OLDAP-2.5', 'Open LDAP Public License v2.5', False, False)
    OLDAP_2_6 = ('OLDAP-2.6', 'Open LDAP Public License v2.6', False, False)
    OLDAP_2_7 = ('OLDAP-2.7', 'Open LDAP Public License v2.7', True, False)
    OLDAP_2_8 = ('OLDAP-2.8', 'Open LDAP Public License v2.8', False, False)
    OML = ('OML', 'Open Market License', False, False)
    OPENSSL = ('OpenSSL', 'OpenSSL License', True, False)
    OPL_1_0 = ('OPL-1.0', 'Open Public License v1.0', False, False)
    OSET_PL_2_1 = ('OSET-PL-2.1', 'OSET Public License version 2.1', False, True)
    OSL_1_0 = ('OSL-1.0', 'Open Software License 1.0', True, True)
    OSL_1_1 = ('OSL-1.1', 'Open Software License 1.1', True, False)
    OSL_2_0 = ('OSL-2.0', 'Open Software License 2.0', True, True)
    OSL_2_1 = ('OSL-2.1', 'Open Software License 2.1', True, True)
    OSL_3_0 = ('OSL-3.0', 'Open Software License 3.0', True, True)
    PARITY_6_0_0 = ('Parity-6.0.0', 'The Parity Public License 6.0.0', False, False)
    PDDL_1_0 = ('PDDL-1.0', 'ODC Public Domain Dedication & License 1.0', False, False)
    # The leading hyphen is part of the identifier as listed; see
    # tests/lf_catalog_test.py::TestKnownDataQuirks.
    PHP_3_0 = ('-PHP\u00a03.0', 'PHP License v3.0', False, True)
    PHP_3_01 = ('-PHP\u00a03.01', 'PHP License v3.01', True, False)
    PLEXUS = ('Plexus', 'Plexus Classworlds License', False, False)
    POSTGRESQL = ('PostgreSQL', 'PostgreSQL License', False, True)
    PSFRAG = ('psfrag', 'psfrag License', False, False)
    PSUTILS = ('psutils', 'psutils License', False, False)
    PYTHON_2_0 = ('Python-2.0', 'Python License 2.0', True, True)
    QHULL = ('Qhull', 'Qhull License', False, False)
    QPL_1_0 = ('QPL-1.0', 'Q Public License 1.0', True, True)
    RDISC = ('Rdisc', 'Rdisc License', False, False)
    RHECOS_1_1 = ('RHeCos-1.1', 'Red Hat eCos Public License v1.1', False, False)
    RPL_1_1 = ('RPL-1.1', 'Reciprocal Public License 1.1', False, True)
    RPL_1_5 = ('RPL-1.5', 'Reciprocal Public License 1.5', False, True)
    RPSL_1_0 = ('RPSL-1.0', 'RealNetworks Public Source License v1.0', True, True)
    RSA_MD = ('RSA-MD', 'RSA Message-Digest License', False, False)
    RSCPL = ('RSCPL', 'Ricoh Source Code Public License', False, True)
    RUBY = ('Ruby', 'Ruby License', True, False)
    SAX_PD = ('SAX-PD', 'Sax Public Domain Notice', False, False)
    SAXPATH = ('Saxpath', 'Saxpath License', False, False)
    SCEA = ('SCEA', 'SCEA Shared Source License', False, False)
    SENDMAIL = ('Sendmail', 'Sendmail License', False, False)
    SENDMAIL_8_23 = ('Sendmail-8.23', 'Sendmail License 8.23', False, False)
    SGI_B_1_0 = ('SGI-B-1.0', 'SGI Free Software License B v1.0', False, False)
    SGI_B_1_1 = ('SGI-B-1.1', 'SGI Free Software License B v1.1', False, False)
    SGI_B_2_0 = ('SGI-B-2.0', 'SGI Free Software License B v2.0', True, False)
    SHL_0_5 = ('SHL-0.5', 'Solderpad Hardware License v0.5', False, False)
    SHL_0_51 = ('SHL-0.51', 'Solderpad Hardware License, Version 0.51', False, False)
    SIMPL_2_0 = ('SimPL-2.0', 'Simple Public License 2.0', False, True)
    SISSL = ('SISSL', 'Sun Industry Standards Source License v1.1', True, True)
    SISSL_1_2 = ('SISSL-1.2', 'Sun Industry Standards Source License v1.2', False, False)
    SLEEPYCAT = ('Sleepycat', 'Sleepycat License', True, True)
    SMLNJ = ('SMLNJ', 'Standard ML of New Jersey License', True, False)
    SMPPL = ('SMPPL', 'Secure Messaging Protocol Public License', False, False)
    SNIA = ('SNIA', 'SNIA Public License 1.1', False, False)
    SPENCER_86 = ('Spencer-86', 'Spencer License 86', False, False)
    SPENCER_94 = ('Spencer-94', 'Spencer License 94', False, False)
    SPENCER_99 = ('Spencer-99', 'Spencer License 99', False, False)
    SPL_1_0 = ('SPL-1.0', 'Sun Public License v1.0', True, True)
    SSH_OPENSSH = ('SSH-OpenSSH', 'SSH OpenSSH license', False, False)
    SSH_SHORT = ('SSH-short', 'SSH short notice', False, False)
    SSPL_1_0 = ('SSPL-1.0', 'Server Side Public License, v 1', False, False)
    SUGARCRM_1_1_3 = ('SugarCRM-1.1.3', 'SugarCRM Public License v1.1.3', False, False)
    SWL = ('SWL', 'Scheme Widget Library (SWL) Software License Agreement', False, False)
    TAPR_OHL_1_0 = ('TAPR-OHL-1.0', 'TAPR Open Hardware License v1.0', False, False)
    TCL = ('TCL', 'TCL/TK License', False, False)
    TCP_WRAPPERS = ('TCP-wrappers', 'TCP Wrappers License', False, False)
    TMATE = ('TMate', 'TMate Open Source License', False, False)
    TORQUE_1_1 = ('TORQUE-1.1', 'TORQUE v2.5+ Software License v1.1', False, False)
    TOSL = ('TOSL', 'Trusster Open Source License', False, False)
    TU_BERLIN_1_0 = ('TU-Berlin-1.0', 'Technische Universitaet Berlin License 1.0', False, False)
    TU_BERLIN_2_0 = ('TU-Berlin-2.0', 'Technische Universitaet Berlin License 2.0', False, False)
    UCL_1_0 = ('UCL-1.0', 'Upstream Compatibility License v1.0', False, True)
    UNICODE_DFS_2015 = ('Unicode-DFS-2015', 'Unicode License Agreement - Data Files and Software (2015)', False, False)
    UNICODE_DFS_2016 = ('Unicode-DFS-2016', 'Unicode License Agreement - Data Files and Software (2016)', False, False)
    UNICODE_TOU = ('Unicode-TOU', 'Unicode Terms of Use', False, False)
    UNLICENSE = ('Unlicense', 'The Unlicense', True, False)
    UPL_1_0 = ('UPL-1.0', 'Universal Permissive License v1.0', True, True)
    VIM = ('Vim', 'Vim License', True, False)
    VOSTROM = ('VOSTROM', 'VOSTROM Public License for Open Source', False, False)
    VSL_1_0 = ('VSL-1.0', 'Vovida Software License v1.0', False, True)
    W3C = ('W3C', 'W3C Software Notice and License (2002-12-31)', True, True)
    W3C_19980720 = ('W3C-19980720', 'W3C Software Notice and License (1998-07-20)', False, False)
    W3C_20150513 = ('W3C-20150513', 'W3C Software Notice and Document License (2015-05-13)', False, False)
    WATCOM_1_0 = ('Watcom-1.0', 'Sybase Open Watcom Public License 1.0', False, True)
    WSUIPA = ('Wsuipa', 'Wsuipa License', False, False)
    WTFPL = ('WTFPL', 'Do What The F*ck You Want To Public License', True, False)
    X11 = ('X11', 'X11 License', True, False)
    XEROX = ('Xerox', 'Xerox License', False, False)
    XFREE86_1_1 = ('XFree86-1.1', 'XFree86 License 1.1', True, False)
    XINETD = ('xinetd', 'xinetd License', True, False)
    XNET = ('Xnet', 'X.Net License', False, True)
    XPP = ('xpp', 'XPP License', False, False)
    XSKAT = ('XSkat', 'XSkat License', False, False)
    YPL_1_0 = ('YPL-1.0', 'Yahoo! Public License v1.0', False, False)
    YPL_1_1 = ('YPL-1.1', 'Yahoo! Public License v1.1', True, False)
    ZED = ('Zed', 'Zed License', False, False)
    ZEND_2_0 = ('Zend-2.0', 'Zend License v2.0', True, False)
    ZIMBRA_1_3 = ('Zimbra-1.3', 'Zimbra Public License v1.3', True, False)
    ZIMBRA_1_4 = ('Zimbra-1.4', 'Zimbra Public License v1.4', False, False)
    ZLIB = ('Zlib', 'zlib License', True, True)
    ZLIB_ACKNOWLEDGEMENT = ('zlib-acknowledgement', 'zlib/libpng License with Acknowledgement', False, False)
    ZPL_1_1 = ('ZPL-1.1', 'Zope Public License 1.1', False, False)
    ZPL_2_0 = ('ZPL-2.0', 'Zope Public License 2.0', True, True)
    ZPL_2_1 = ('ZPL-2.1', 'Zope Public License 2.1', True, False)

    @classmethod
    def count(cls) -> int:
        """Return the number of licenses in the catalog.

        The number is allowed to change between otherwise compatible
        releases.
        """
        return COUNT

    @classmethod
    def all(cls) -> tuple[SpdxLicense, ...]:
        """Return every license exactly once, in ordinal order."""
        return _ALL

    @classmethod
    def parse(cls, license_id: str) -> SpdxLicense:
        """Resolve *license_id* to a license. See :func:`parse`."""
        return parse(license_id)

    @property
    def ordinal(self) -> int:
        """Zero-based declaration position."""
        return self._value_

    @property
    def identifier(self) -> str:
        """The SPDX short identifier, e.g. ``"Apache-2.0"``."""
        return ID[self._value_]

    @property
    def display_name(self) -> str:
        """The full name of the license."""
        return NAME[self._value_]

    @property
    def is_libre(self) -> bool:
        """Considered libre/free by the Free Software Foundation."""
        return LIBRE[self._value_]

    @property
    def is_osi_approved(self) -> bool:
        """Approved by the Open Source Initiative."""
        return OSI[self._value_]

    @property
    def is_gpl(self) -> bool:
        """Whether this is a GNU General Public License."""
        return self in GPL

    @property
    def is_agpl(self) -> bool:
        """Whether this is an Affero General Public License."""
        return self in AGPL

    @property
    def is_creative_commons(self) -> bool:
        """Whether this license is published by Creative Commons."""
        return self in CREATIVE_COMMONS

    def __str__(self) -> str:
        """Return the SPDX identifier."""
        return ID[self._value_]

    def __format__(self, format_spec: str) -> str:
        """Format the SPDX identifier."""
        return format(ID[self._value_], format_spec)


# ── Attribute tables ─────────────────────────────────────────────────

#: Identifier of each license, indexed by ordinal.
ID: Final[tuple[str, ...]] = tuple(row[0] for row in _DECLARED)

#: Display name of each license, indexed by ordinal.
NAME: Final[tuple[str, ...]] = tuple(row[1] for row in _DECLARED)

#: FSF libre flag of each license, indexed by ordinal.
LIBRE: Final[tuple[bool, ...]] = tuple(row[2] for row in _DECLARED)

#: OSI approval flag of each license, indexed by ordinal.
OSI: Final[tuple[bool, ...]] = tuple(row[3] for row in _DECLARED)

#: Number of licenses in the catalog.
COUNT: Final[int] = len(_DECLARED)

_ALL: Final[tuple[SpdxLicense, ...]] = tuple(SpdxLicense)


# ── Families ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class LicenseFamily:
    """An inclusive run of adjacent declarations sharing a lineage.

    Membership is two integer comparisons, which is only correct while
    every member of the family is declared between :attr:`first` and
    :attr:`last` and nothing else is.  :func:`linfo.spdx.validate_catalog`
    checks that using :attr:`prefixes`.

    Attributes:
        key: Short name used on the command line (e.g. ``"gpl"``).
        title: Human-readable family name.
        first: First member in declaration order.
        last: Last member in declaration order.
        prefixes: Identifier prefixes that every member, and no
            non-member, carries.
    """

    key: str
    title: str
    first: SpdxLicense
    last: SpdxLicense
    prefixes: tuple[str, ...]

    def __contains__(self, item: object) -> bool:
        """Return ``True`` if *item* is a license inside this family's span."""
        if not isinstance(item, SpdxLicense):
            return False
        return self.first._value_ <= item._value_ <= self.last._value_

    def members(self) -> tuple[SpdxLicense, ...]:
        """Return the family's licenses in ordinal order."""
        return _ALL[self.first._value_ : self.last._value_ + 1]


GPL: Final = LicenseFamily(
    key='gpl',
    title='GNU General Public License',
    first=SpdxLicense.GPL_1_0_ONLY,
    last=SpdxLicense.GPL_3_0_OR_LATER,
    prefixes=('GPL-',),
)

AGPL: Final = LicenseFamily(
    key='agpl',
    title='Affero General Public License',
    first=SpdxLicense.AGPL_1_0_ONLY,
    last=SpdxLicense.AGPL_3_0_OR_LATER,
    prefixes=('AGPL-',),
)

CREATIVE_COMMONS: Final = LicenseFamily(
    key='cc',
    title='Creative Commons',
    first=SpdxLicense.CC_BY_1_0,
    last=SpdxLicense.CC0_1_0,
    prefixes=('CC-', 'CC0-'),
)

#: Every family, keyed by :attr:`LicenseFamily.key`.
FAMILIES: Final[Mapping[str, LicenseFamily]] = MappingProxyType({f.key: f for f in (GPL, AGPL, CREATIVE_COMMONS)})


# ── Identifier index ─────────────────────────────────────────────────


def _build_index() -> dict[str, SpdxLicense]:
    """Map each identifier to its license.

    Duplicate identifiers are reported by
    :func:`linfo.spdx.validate_catalog`, which runs before the package
    finishes importing.
    """
    return {ID[lic._value_]: lic for lic in _ALL}


_ID_TO_LICENSE: Final[Mapping[str, SpdxLicense]] = MappingProxyType(_build_index())


def parse(license_id: str) -> SpdxLicense:
    """Resolve an SPDX identifier to its license.

    Matching is exact: case-sensitive, no trimming, no aliases.

    Args:
        license_id: The identifier to look up (e.g. ``"MIT"``).

    Returns:
        The license whose identifier equals *license_id*.

    Raises:
        EmptyLicenseIdError: If *license_id* is empty.
        UnknownLicenseIdError: If no license has that identifier.
    """
    if not license_id:
        raise EmptyLicenseIdError
    try:
        return _ID_TO_LICENSE[license_id]
    except KeyError:
        raise UnknownLicenseIdError(license_id) from None


def try_parse(license_id: str) -> SpdxLicense | None:
    """Like :func:`parse`, but return ``None`` instead of raising."""
    return _ID_TO_LICENSE.get(license_id)
