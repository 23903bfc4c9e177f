import textwrap

import pytest


@pytest.fixture
def inv_netlist():
    return textwrap.dedent(
        """\
        .SUBCKT inv A Y VDD VSS
        MP1 Y A VDD VDD pch W=2u L=180n

        MN1 Y A VSS VSS nch W=1u L=180n FINGERS=2
        .ENDS
        """
    )


@pytest.fixture
def inv_descriptor():
    return textwrap.dedent(
        """\
        # generated port list
        inv:
            A:
              direction: input
            Y:
              direction: output
            VDD:
              direction: inout
            VSS:
        """
    )
