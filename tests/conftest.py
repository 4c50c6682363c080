"""Shared fixtures for the switchexporter test suite."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from switchexporter.metrics import RequestMetrics

# ── status pages ──────────────────────────────────────────────────────

# Captured from a TL-SG108E.
PORT_STATISTICS_PAGE = """<!DOCTYPE html>
<script>
var max_port_num = 8;
var port_middle_num  = 16;
var all_info = {
state:[0,1,1,1,1,1,1,1,0,0],
link_status:[0,6,0,0,0,5,6,6,0,0],
pkts:[11,0,0,0,208626,0,59405,0,0,0,0,0,0,0,0,0,26977,0,7514,0,52850,0,14235,0,3178723,0,2274174,0,2362493,0,3327460,0,0,0]
};
var tip = "";
</script>
 <head> <meta charset=gb2312> <script>document.write(top.Abbrev)</script> <script type=text/javascript>incCss("main.css"),incCss("help.css"),incJs("ui.js"),incJs("help.js"),incJs("tips.js");var state_info=new Array("Disabled","Enabled"),link_info=new Array("Link Down","Auto","10Half","10Full","100Half","100Full","1000Full","");function dosubmitClear(){return document.port_statistics.submit(),!0}function dosubmitRefresh(){document.location.href="PortStatisticsRpm.htm"}</script> </head> <body> <div id=div_tip_mask class=TIP_MASK> <div id=div_tip_svr class=TIP><span id=sp_tip_svr class=TIP_CONTENT></span></div> </div> <form name=port_statistics action=port_statistics_set.cgi enctype=multipart/form-data> <fieldset> <legend> <span id=portStatisticsInformation class=PAIN_TITLE>Port Statistics Info</span> </legend> <div id=div_sec_title> <table class=BORDER> <script>var index,tmp_info2,all_info2,port_id,state,link_status,tx_good,tx_bad,rx_good,rx_bad,LineTd="<td class=TABLE_HEAD_BOTTOM align=center width=78px>";for(docW("<tr class=TD_FIRST_ROW>"),docW(LineTd+"Port"),docW("</td>"),docW(LineTd+"Status"),docW("</td>"),docW(LineTd+"Link Status"),docW("</td>"),docW(LineTd+"TxGoodPkt"),docW("</td>"),docW(LineTd+"TxBadPkt"),docW("</td>"),docW(LineTd+"RxGoodPkt"),docW("</td>"),docW(LineTd+"RxBadPkt"),docW("</td>"),docW("</tr>"),index=0;index<max_port_num;index++)port="Port "+(port_id=index+1),state=state_info[all_info.state[index]],link_status=link_info[all_info.link_status[index]],tx_good=all_info.pkts[4*index],tx_bad=all_info.pkts[4*index+1],rx_good=all_info.pkts[4*index+2],rx_bad=all_info.pkts[4*index+3],docW("<tr>"),docW(LineTd+port),docW("</td>"),docW(LineTd+state),docW("</td>"),docW(LineTd+link_status),docW("</td>"),docW(LineTd+tx_good),docW("</td>"),docW(LineTd+tx_bad),docW("</td>"),docW(LineTd+rx_good),docW("</td>"),docW(LineTd+rx_bad),docW("</td>"),docW("</tr>")</script> </table> </div> </fieldset> </form> <script>""!=tip&&(ShowTips("sp_tip_svr",tip),startDownScroll("div_tip_svr"))</script>"""

LOGIN_PAGE = """<!DOCTYPE html>
<script>
var logonInfo = new Array(
1,
0,0);
var g_Lan = 0;
</script>
<form name=logon action=logon.cgi method=post></form>"""

_PAGE_TEMPLATE = """<html>
<script>
var max_port_num = {max_port_num};
var port_middle_num  = 16;
var all_info = {{
state:{state},
link_status:{link_status},
pkts:{pkts}
}};
var tip = "";
</script>
<body></body>
</html>"""


@pytest.fixture()
def port_statistics_page() -> bytes:
    """Real TL-SG108E status page with 8 ports."""
    return PORT_STATISTICS_PAGE.encode()


@pytest.fixture()
def login_page() -> bytes:
    """Page served instead of the statistics when the login was not accepted."""
    return LOGIN_PAGE.encode()


@pytest.fixture()
def make_page():
    """Factory fixture building a minimal status page.

    Lists are JSON-encoded; strings are inserted verbatim so malformed
    fields can be tested.
    """

    def _fmt(value) -> str:
        if isinstance(value, str):
            return value
        return json.dumps(value, separators=(",", ":"))

    def _make(max_port_num=2, state=None, link_status=None, pkts=None) -> bytes:
        n = max_port_num if isinstance(max_port_num, int) else 0
        return _PAGE_TEMPLATE.format(
            max_port_num=max_port_num,
            state=_fmt(state if state is not None else [1] * n),
            link_status=_fmt(link_status if link_status is not None else [6] * n),
            pkts=_fmt(pkts if pkts is not None else [0] * (4 * n)),
        ).encode()

    return _make


# ── HTTP mocks ────────────────────────────────────────────────────────


@pytest.fixture()
def make_response():
    """Factory fixture returning a mocked ``requests.Response``."""

    def _make(status_code: int = 200, content: bytes = b""):
        resp = MagicMock()
        resp.status_code = status_code
        type(resp).content = PropertyMock(return_value=content)
        return resp

    return _make


@pytest.fixture()
def mock_session():
    """Patch ``requests.Session`` in the TP-Link transport and return the session mock."""
    with patch("switchexporter.vendors.tplink.http.requests.Session") as session_class:
        session = MagicMock()
        session_class.return_value = session
        yield session


# ── collector mocks ───────────────────────────────────────────────────


@pytest.fixture()
def mock_switch_client():
    """MagicMock of a BaseSwitchClient with real request metrics."""
    client = MagicMock()
    client.host = "10.0.0.1"
    client.request_metrics = RequestMetrics()
    client.get_port_stats.return_value = []
    return client
