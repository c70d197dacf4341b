#
# file:     netscaler_fingerprint/catalog.py
# author:   Fox-IT Security Research Team <srt@fox-it.com>
#
# Known NetScaler build timestamps (rdx_en.json.gz MTIME) and the release they belong to.
#
from __future__ import annotations

import logging
from typing import Iterator, NamedTuple

log = logging.getLogger(__name__)

# Original Citrix NetScaler version CSV file, timestamps rewritten to RFC3339 ("T" separator):
#  - https://gist.github.com/fox-srt/c7eb3cbc6b4bf9bb5a874fa208277e86
CITRIX_NETSCALER_VERSION_CSV = """
rdx_en_date,rdx_en_stamp,vhash,version
2018-08-25T03:29:12+00:00,1535167752,,12.1-49.23
2018-10-16T17:54:20+00:00,1539712460,,12.1-49.37
2018-11-28T08:56:26+00:00,1543395386,26df0e65fba681faaeb333058a8b28bf,12.1-50.28
2019-01-18T17:41:34+00:00,1547833294,d3b5c691a4cfcc6769da8dc4e40f511d,12.1-50.31
2019-02-13T06:11:52+00:00,1550038312,1ffe249eccc42133689c145dc37d6372,unknown
2019-02-27T09:30:02+00:00,1551259802,995a76005c128f4e89474af12ac0de66,12.1-51.16
2019-03-25T22:37:08+00:00,1553553428,d2bd166fed66cdf035a0778a09fd688c,12.1-51.19
2019-04-19T11:04:22+00:00,1555671862,489cadbd8055b1198c9c7fa9d34921b9,unknown
2019-05-13T17:41:47+00:00,1557769307,86b4b2567b05dff896aae46d6e0765bc,13.0-36.27
2019-06-03T08:17:03+00:00,1559549823,73217f4753a74300c0a2ad762c6f1e65,unknown
2019-07-15T16:42:47+00:00,1563208967,dc8897f429a694d44934954b47118908,unknown
2019-09-10T07:54:45+00:00,1568102085,43a8abf580ea09a5fa8aa1bd579280b9,13.0-41.20
2019-09-16T22:22:54+00:00,1568672574,0705e646dc7f84d77e8e48561253be12,unknown
2019-10-07T10:37:28+00:00,1570444648,09a78a600b4fc5b9f581347604f70c0e,unknown
2019-10-11T13:24:36+00:00,1570800276,7116ed70ec000da9267a019728ed951e,13.0-41.28
2019-11-05T05:18:47+00:00,1572931127,8c62b39f7068ea2f3d3f7d40860c0cd4,12.1-55.13
2019-11-28T19:06:22+00:00,1574967982,fedb4ba86b5edcbc86081f2893dc9fdf,13.0-47.22
2020-01-16T13:36:04+00:00,1579181764,,11.1-63.15
2020-01-20T12:46:27+00:00,1579524387,02d30141fd053d5c3448bf04fbedb8d6,12.1-55.18
2020-01-20T13:09:05+00:00,1579525745,fd96bc8977256003de05ed84270b90bb,13.0-47.24
2020-02-28T14:27:56+00:00,1582900076,f787f9a8c05a502cd33f363e1e9934aa,12.1-55.24
2020-03-18T17:41:16+00:00,1584553276,b5fae8db23061679923e4b2a9b6c7a82,unknown
2020-03-19T17:40:43+00:00,1584639643,e79f3bbf822c1fede6b5a1a4b6035a41,13.0-52.24
2020-03-29T09:10:32+00:00,1585473032,f2db014a3eb9790a19dfd71331e7f5d0,12.1-56.22
2020-06-01T06:48:41+00:00,1590994121,fdf2235967556bad892fbf29ca69eefd,13.0-58.30
2020-06-01T15:16:27+00:00,1591024587,,12.0-63.21
2020-06-02T02:27:33+00:00,1591064853,,11.1-64.14
2020-06-09T19:06:55+00:00,1591729615,4ecb5abf6e4b1655c07386a2c958597c,12.1-57.18
2020-07-02T16:38:13+00:00,1593707893,dcb06155d51a0234e9d127658ef9f21f,13.0-58.32
2020-07-22T19:49:27+00:00,1595447367,12c4901ecc3677aad06f678be49cb837,13.0-61.48
2020-07-30T09:05:04+00:00,1596099904,bf898768ad1e1d477fa649711c72c6df,13.0-61.48
2020-08-14T14:54:04+00:00,1597416844,a1494e2e09cb96e424c6c66512224941,12.1-58.14
2020-09-01T11:47:01+00:00,1598960821,b1b38debf0e55c285c72465da3715034,12.1-58.15
2020-09-01T16:14:56+00:00,1598976896,06fbfcf525e47b5538f856965154e28c,13.0-64.35
2020-09-10T10:26:58+00:00,1599733618,,11.1-65.12
2020-09-22T01:21:45+00:00,1600737705,7a0c8874e93395c5e4f1ef3e5e600a25,12.1-59.16
2020-10-07T16:07:09+00:00,1602086829,a8e0eb4a1b3e157e0d3a5e57dc46fd35,13.0-67.39
2020-10-08T09:03:02+00:00,1602147782,0aef7f8e9ea2b528aa2073f2875a28b8,12.1-55.190
2020-11-04T10:14:41+00:00,1604484881,f1eb8548a4f1d4e565248d4db456fffe,12.1-60.16
2020-11-13T12:56:30+00:00,1605272190,e2444db11d0fa5ed738aa568c2630704,13.0-67.43
2020-11-22T13:29:18+00:00,1606051758,62eba0931b126b1558fea39fb466e588,unknown
2020-11-24T13:26:53+00:00,1606224413,3a65afd164db6f39aa41f5729001d257,13.0-67.43
2020-12-03T05:13:26+00:00,1606972406,9b545e2e4d153348bce08e3923cdfdc1,13.0-71.40
2020-12-26T19:04:08+00:00,1609009448,25ad60e92a33cbb5dbd7cd8c8380360d,13.0-71.44
2020-12-26T19:39:25+00:00,1609011565,0b516b768edfa45775c4be130c4b96b5,12.1-60.19
2021-01-04T03:07:45+00:00,1609729665,b3deb35b8a990a71acca052fd1e6e6e1,12.1-55.210
2021-01-06T09:43:42+00:00,1609926222,f0cc58ce7ec931656d9fcbfe50d37c4b,unknown
2021-02-02T13:36:06+00:00,1612272966,83e486e7ee7eb07ab88328a51466ac28,12.1-61.18
2021-02-18T18:37:49+00:00,1613673469,454d4ccdefa1d802a3f0ca474a2edd73,13.0-76.29
2021-03-08T17:23:41+00:00,1615224221,08ff522057b9422863dbabb104c7cf4b,12.1-61.19
2021-03-09T09:20:39+00:00,1615281639,648767678188e1567b7d15eee5714220,13.0-76.31
2021-03-11T15:46:10+00:00,1615477570,ce5da251414abbb1b6aed6d6141ed205,12.1-61.19
2021-04-05T14:13:22+00:00,1617632002,5e55889d93ff0f13c39bbebb4929a68e,13.0-79.64
2021-05-10T14:38:02+00:00,1620657482,35389d54edd8a7ef46dadbd00c1bc5ac,12.1-62.21
2021-05-12T11:36:11+00:00,1620819371,9f4514cd7d7559fa1fb28960b9a4c22d,unknown
2021-05-17T15:56:11+00:00,1621266971,8e4425455b9da15bdcd9d574af653244,12.1-62.23
2021-05-29T18:33:31+00:00,1622313211,,11.1-65.20
2021-05-31T14:05:18+00:00,1622469918,73952bdeead9629442cd391d64c74d93,13.0-82.41
2021-06-10T19:21:20+00:00,1623352880,25169dea48ef0f939d834468f3c626d2,13.0-82.42
2021-06-10T23:39:05+00:00,1623368345,efb9d8994f9656e476e80f9b278c5dae,12.1-62.25
2021-07-06T17:02:58+00:00,1625590978,affa5cd9f00480f144eda6334e03ec27,unknown
2021-07-07T01:45:38+00:00,1625622338,e1ebdcea7585d24e9f380a1c52a77f5d,12.1-62.27
2021-07-07T06:20:31+00:00,1625638831,,11.1-65.22
2021-07-16T16:45:56+00:00,1626453956,eb3f8a7e3fd3f44b70c121101618b80d,13.0-82.45
2021-09-10T07:31:30+00:00,1631259090,98a21b87cc25d486eb4189ab52cbc870,13.1-4.43
2021-09-27T14:01:20+00:00,1632751280,c9e95a96410b8f8d4bde6fa31278900f,13.0-83.27
2021-10-06T13:25:54+00:00,1633526754,394e3fa5ffce140c9dd4bedc38ddefa7,13.1-9.52
2021-10-12T11:53:46+00:00,1634039626,435b27d8f59f4b64a6beccb39ce06237,unknown
2021-10-12T18:49:09+00:00,1634064549,,11.1-65.23
2021-10-13T08:24:09+00:00,1634113449,f3d4041188d723fec4547b1942ffea93,12.1-63.22
2021-11-11T14:42:53+00:00,1636641773,158c7182df4973f1f5346e21e9d97a01,13.1-4.44
2021-11-11T17:02:35+00:00,1636650155,a66c02f4d04a1bd32bfdcc1655c73466,13.0-83.29
2021-11-11T20:06:47+00:00,1636661207,5cd6bd7d0aec5dd13a1afb603111733a,12.1-63.23
2021-11-17T15:43:23+00:00,1637163803,645bded68068748e3314ad3e3ec8eb8f,13.1-9.60
2021-11-26T05:41:16+00:00,1637905276,7277ec67fd822b7dae3399aa71786a0a,13.1-9.107
2021-12-08T13:14:05+00:00,1638969245,e8ff095e03a3efcff7ed851bfb9141e5,13.1-9.112
2021-12-10T16:17:15+00:00,1639153035,5112d5394de0cb5f6d474e032a708907,13.1-12.50
2021-12-10T18:48:29+00:00,1639162109,3a316d2de5362e9f76280b3157f48d08,13.0-84.10
2021-12-17T08:48:15+00:00,1639730895,bb71c656f6b4e0e1573c77c6536397c3,13.1-12.103
2021-12-22T09:54:58+00:00,1640166898,ee44bd3bc047aead57bc000097e3d8aa,12.1-63.24
2021-12-22T10:57:32+00:00,1640170652,13693866faf642734f0498eb45f73672,unknown
2021-12-22T15:18:49+00:00,1640186329,2b46554c087d2d5516559e9b8bc1875d,13.0-84.11
2021-12-23T08:28:43+00:00,1640248123,cf9d354b261231f6c6121058ba143af7,13.1-12.51
2022-01-20T02:36:41+00:00,1642646201,c6bcd2f119d83d1de762c8c09b482546,12.1-64.16
2022-01-28T06:22:15+00:00,1643350935,b3fb0319d5d2dad8c977b9986cc26bd8,12.1-55.265
2022-02-21T12:49:29+00:00,1645447769,0f3a063431972186f453e07954f34eb8,13.1-17.42
2022-02-23T07:02:10+00:00,1645599730,7364f85dc30b3d570015e04f90605854,unknown
2022-03-10T15:17:42+00:00,1646925462,e42d7b3cf4a6938aecebdae491ba140c,13.0-85.15
2022-03-25T20:49:02+00:00,1648241342,71ad6c771d99d846195b67c30bfb0433,13.1-12.117
2022-04-01T19:41:31+00:00,1648842091,310ffb5a44db3a14ed623394a4049ff9,unknown
2022-04-03T05:18:28+00:00,1648963108,2edf0f445b69b2e322e80dbc3f6f711c,12.1-55.276
2022-04-07T06:11:44+00:00,1649311904,b4ac9c8852a04234f38d73d1d8238d37,13.1-21.50
2022-04-21T07:34:34+00:00,1650526474,9f73637db0e0f987bf7825486bfb5efe,12.1-55.278
2022-04-21T10:38:48+00:00,1650537528,c212a67672ef2da5a74ecd4e18c25835,12.1-64.17
2022-04-22T19:18:31+00:00,1650655111,fbdc5fbaed59f858aad0a870ac4a779c,12.1-65.15
2022-05-09T12:54:41+00:00,1652100881,e24224ce907593aaadd243831b51dbd7,13.1-12.130
2022-05-19T08:10:13+00:00,1652947813,1884e7877a13a991b6d3fac01efbaf79,13.0-85.19
2022-05-26T12:51:09+00:00,1653569469,853edb55246c138c530839e638089036,13.1-24.38
2022-06-14T17:03:48+00:00,1655226228,7a45138b938a54ab056e0c35cf0ae56c,13.0-86.17
2022-06-29T13:46:08+00:00,1656510368,4434db1ec24dd90750ea176f8eab213c,12.1-65.17
2022-07-06T08:54:42+00:00,1657097682,469591a5ef8c69899320a319d5259922,12.1-55.282
2022-07-06T10:41:43+00:00,1657104103,adc1f7c850ca3016b21776467691a767,13.1-27.59
2022-07-12T19:52:59+00:00,1657655579,8f1767a6961f7b797d318d884dbb3a9c,13.1-12.131
2022-07-29T17:39:52+00:00,1659116392,1f63988aa4d3f6d835704be50c56788a,13.0-87.9
2022-08-24T14:57:01+00:00,1661353021,57d9f58db7576d6a194d7dd10888e354,13.1-30.52
2022-09-05T09:57:52+00:00,1662371872,8c6bef3b4f16d6c9bfc2913aae2535d1,13.1-30.103
2022-09-07T12:17:13+00:00,1662553033,f214d9aa6ff8f43fdb17ce81caac723f,13.1-30.105
2022-09-23T18:53:35+00:00,1663959215,7afe87a42140b566a2115d1e232fdc07,13.1-33.47
2022-09-27T12:31:22+00:00,1664281882,8cbccac1a96eee108ae3c85bf9ff845a,13.1-30.108
2022-09-30T04:47:01+00:00,1664513221,212fa0e7b3a5ca540f156caceba507fe,13.1-30.109
2022-10-04T12:03:35+00:00,1664885015,29adf2b509250b780bac083577c92b45,13.1-30.111
2022-10-04T16:11:03+00:00,1664899863,c1b64cea1b80e973580a73b787828daf,12.1-65.21
2022-10-12T07:25:44+00:00,1665559544,4d817946cef53571bc303373fd6b406b,12.1-55.289
2022-10-12T17:01:28+00:00,1665594088,aff0ad8c8a961d7b838109a7ee532bcb,13.1-33.49
2022-10-14T17:10:45+00:00,1665767445,37c10ac513599cf39997d52168432c0e,13.0-88.12
2022-10-31T15:54:59+00:00,1667231699,27292ddd74e24a311e4269de9ecaa6e7,13.0-88.13
2022-10-31T16:31:43+00:00,1667233903,5e939302a9d7db7e35e63a39af1c7bec,13.1-33.51
2022-11-03T05:22:05+00:00,1667452925,6e7b2de88609868eeda0b1baf1d34a7e,13.0-88.14
2022-11-03T05:38:29+00:00,1667453909,56672635f81a1ce1f34f828fef41d2fa,13.1-33.52
2022-11-11T04:16:21+00:00,1668140181,8ecc8331379bc60f49712c9b25f276ea,unknown
2022-11-11T06:00:31+00:00,1668146431,86c7421a034063574799dcd841ee88f0,unknown
2022-11-17T09:55:40+00:00,1668678940,9bf6d5d3131495969deba0f850447947,13.1-33.54
2022-11-17T10:37:18+00:00,1668681438,3bd7940b6425d9d4dba7e8b656d4ba65,13.0-88.16
2022-11-23T11:42:31+00:00,1669203751,0d656200c32bb47c300b81e599260c42,13.1-37.38
2022-11-28T11:55:05+00:00,1669636505,953fae977d4baedf39e83c9d1e134ef1,12.1-55.291
2022-11-30T11:42:25+00:00,1669808545,f063b04477adc652c6dd502ac0c39a75,12.1-65.25
2022-12-01T10:48:25+00:00,1669891705,c0c00b7caed367b1569574e4982294c5,13.1-30.114
2022-12-14T15:54:39+00:00,1671033279,14c6a775edda324764a940cfd3da48cb,13.0-89.7
2023-01-24T17:44:35+00:00,1674582275,c2b8537eb733844f1e0cc4f63210d016,13.0-90.7
2023-02-22T13:31:29+00:00,1677072689,b4c220db03ea18bc2eebb40e9ad3f4f8,13.1-42.47
2023-04-05T06:57:33+00:00,1680677853,0b2a3cb74b5c6adbe28827e8b76a9f64,12.1-55.296
2023-04-12T08:05:14+00:00,1681286714,6925fba74320b9bfb960299f7c3e7cce,13.1-45.61
2023-04-17T18:09:24+00:00,1681754964,cdb72bd7677da8af9942897256782c9b,13.1-37.150
2023-04-19T15:34:38+00:00,1681918478,281b46a105662de06fb259293aa79f2a,13.0-90.11
2023-04-26T11:42:55+00:00,1682509375,1487b55f253ea54b1d3603cc1212f164,13.1-45.62
2023-04-28T20:39:00+00:00,1682714340,a6a783263968040a97e44d7cac55eda6,12.1-65.35
2023-04-30T08:54:31+00:00,1682844871,d72c9f2af7ccded704862da7486cfef2,13.1-45.63
2023-05-12T04:49:56+00:00,1683866996,,13.0-91.12
2023-05-12T07:33:58+00:00,1683876838,14195083e08df261613408eb5cf3b212,13.1-45.64
2023-05-15T10:23:44+00:00,1684146224,4d63b52cc99fe712f9be5e4795c854e9,13.0-90.12
2023-06-03T07:35:50+00:00,1685777750,,13.1-48.47
2023-07-07T15:32:56+00:00,1688743976,,13.0-91.13
2023-07-07T16:15:10+00:00,1688746510,e72b4f05a103118667208783b57eee3b,unknown
2023-07-07T16:17:07+00:00,1688746627,46d83b1a2981c1cfefe8d3063adf78f4,13.1-37.159
2023-07-07T16:29:27+00:00,1688747367,28e592a607e8919cc6ca7dec63590e04,12.1-55.297
2023-07-10T01:57:59+00:00,1688954279,,13.1-49.101
2023-07-10T18:36:31+00:00,1689014191,,13.1-49.13
2023-07-11T07:14:37+00:00,1689059677,,13.1-49.102
2023-07-20T04:36:25+00:00,1689827785,,13.1-49.106
2023-07-28T00:25:01+00:00,1690503901,,14.1-4.42
2023-08-30T07:03:54+00:00,1693379034,,13.0-92.18
2023-09-15T06:40:36+00:00,1694760036,,14.1-8.50
2023-09-21T05:25:24+00:00,1695273924,,13.0-92.19
2023-09-21T06:17:01+00:00,1695277021,,13.1-49.15
2023-09-21T08:15:02+00:00,1695284102,e1aa8ba6d7e558d43f0369d9b81cbb1c,12.1-65.37
2023-09-21T17:12:48+00:00,1695316368,155a75fb7efac3347e7362fd23083aa5,12.1-55.300
2023-09-27T12:27:52+00:00,1695817672,,13.1-37.164
2023-10-18T07:27:04+00:00,1697614024,,13.1-50.23
2023-11-22T18:19:39+00:00,1700677179,,14.1-12.30
2023-12-06T18:15:43+00:00,1701886543,,14.1-8.120
2023-12-08T11:31:08+00:00,1702035068,,14.1-12.34
2023-12-08T19:10:40+00:00,1702062640,,13.1-51.14
2023-12-14T10:12:36+00:00,1702548756,,13.0-92.21
2023-12-15T07:26:58+00:00,1702625218,,13.1-51.15
2023-12-15T09:18:34+00:00,1702631914,,14.1-12.35
2023-12-18T07:59:52+00:00,1702886392,f6beac6ccd073f5f7c1a64c4c7e24c7e,12.1-55.302
2023-12-18T14:16:04+00:00,1702908964,9debca402a9fae56a0d5e0979f685cf2,12.1-65.39
2024-01-02T11:24:56+00:00,1704194696,,14.1-8.122
2024-01-05T04:15:53+00:00,1704428153,,13.1-37.176
2024-02-08T05:34:51+00:00,1707370491,,14.1-17.38
2024-02-29T17:31:08+00:00,1709227868,,13.1-52.19
2024-04-18T21:13:30+00:00,1713474810,,14.1-21.57
2024-04-26T11:56:34+00:00,1714132594,08604a97f08f6973502adb8ebf78e0b0,12.1-55.304
2024-05-01T05:48:44+00:00,1714542524,fe1071e2b14a5b5016d3eb57ddcfc86d,12.1-55.304
2024-05-13T16:45:28+00:00,1715618728,,13.1-53.17
2024-05-14T12:55:51+00:00,1715691351,,13.1-37.183
2024-06-08T07:28:50+00:00,1717831730,,14.1-25.53
2024-06-24T12:44:20+00:00,1719233060,,14.1-25.107
2024-07-04T10:41:15+00:00,1720089675,,13.0-92.31
2024-07-04T14:32:40+00:00,1720103560,,13.1-53.24
2024-07-04T16:31:28+00:00,1720110688,,14.1-25.56
2024-07-04T16:49:33+00:00,1720111773,,13.1-37.190
2024-07-05T06:07:38+00:00,1720159658,,14.1-25.108
2024-07-08T18:53:11+00:00,1720464791,,13.0-92.31
2024-07-17T17:53:35+00:00,1721238815,,13.1-54.29
2024-08-13T11:43:40+00:00,1723549420,,13.1-37.199
2024-10-07T20:11:28+00:00,1728331888,,13.1-37.207
2024-10-07T20:55:33+00:00,1728334533,a7c411815373059b33b4d83bed6145a2,12.1-55.321
2024-10-11T10:23:04+00:00,1728642184,,14.1-29.72
2024-10-21T20:52:15+00:00,1729543935,0dd3f401dd33679f07e06961db10a298,12.1-55.321
2024-10-22T01:37:14+00:00,1729561034,,14.1-34.42
2024-10-24T13:43:49+00:00,1729777429,,13.1-55.34
2024-10-29T06:55:25+00:00,1730184925,,14.1-34.101
2024-11-07T16:17:10+00:00,1730996230,,13.1-56.18
2024-11-29T10:21:03+00:00,1732875663,,13.1-37.219
2024-12-16T17:20:08+00:00,1734369608,,14.1-38.53
2025-01-25T10:12:49+00:00,1737799969,,13.1-57.26
2025-02-11T01:19:25+00:00,1739236765,c624dcce8d3355d555021d2aac5f9715,12.1-55.325
2025-02-21T16:41:24+00:00,1740156084,,14.1-43.50
2025-03-06T13:19:10+00:00,1741267150,,14.1-34.105
2025-03-14T09:32:59+00:00,1741944779,,14.1-34.107
2025-04-01T08:43:29+00:00,1743497009,,13.1-37.232
2025-04-08T14:08:19+00:00,1744121299,,13.1-58.21
2025-04-09T07:52:44+00:00,1744185164,,14.1-43.109
2025-05-13T17:58:16+00:00,1747159096,,14.1-47.40
2025-05-20T07:48:42+00:00,1747727322,,14.1-47.43
2025-05-21T08:05:34+00:00,1747814734,,14.1-47.44
2025-06-07T13:53:15+00:00,1749304395,,14.1-47.46
2025-06-10T10:53:47+00:00,1749552827,,14.1-43.56
2025-06-10T14:02:25+00:00,1749564145,89929af92ff35a042d78e9010b7ec534,12.1-55.328
2025-06-10T16:26:42+00:00,1749572802,,13.1-37.235
2025-06-10T20:52:27+00:00,1749588747,,13.1-58.32
2025-06-17T04:21:23+00:00,1750134083,f069136a9297a52b6d86a5de987d9323,12.1-55.328
2025-06-18T13:04:11+00:00,1750251851,,13.1-59.19
2025-08-20T12:21:05+00:00,1755692465,765c645f7af4a1ef5c11d464fafc6244,12.1-55.330
2025-08-20T12:23:35+00:00,1755692615,,14.1-47.48
2025-08-20T12:35:34+00:00,1755693334,,13.1-37.241
2025-08-20T12:44:46+00:00,1755693886,,13.1-59.22
2025-08-26T02:22:30+00:00,1756174950,a53b1af56a97019171ec39665fedc54a,12.1-55.330
"""


class VersionRecord(NamedTuple):
    build_timestamp: str
    version: str


class VersionCatalog:
    """Read-only table of build timestamps to NetScaler versions.

    Built once at startup and shared by every probe, lookups never mutate it.

    >>> catalog = VersionCatalog.from_text("2024-07-04T16:31:28+00:00,1720110688,,14.1-25.56")
    >>> catalog.lookup("2024-07-04T16:31:28+00:00")
    '14.1-25.56'
    >>> catalog.lookup("2024-07-04 16:31:28+00:00") is None
    True
    """

    def __init__(self, records: list[VersionRecord]):
        self._records = tuple(records)
        self._index: dict[str, str] = {}
        for record in self._records:
            # duplicates in the table: first one wins
            self._index.setdefault(record.build_timestamp, record.version)

    @classmethod
    def from_text(cls, text: str) -> VersionCatalog:
        records = []
        for line in text.splitlines():
            if not line.strip():
                continue
            row = line.split(",")
            if len(row) != 4:
                log.debug("Skipping malformed version row: %r", row)
                continue
            records.append(VersionRecord(build_timestamp=row[0], version=row[3]))
        return cls(records)

    @classmethod
    def from_file(cls, path: str) -> VersionCatalog:
        with open(path, encoding="utf-8") as fh:
            return cls.from_text(fh.read())

    @classmethod
    def default(cls) -> VersionCatalog:
        return cls.from_text(CITRIX_NETSCALER_VERSION_CSV)

    def lookup(self, build_timestamp: str) -> str | None:
        """Return the version for an exact timestamp string match, or None."""
        return self._index.get(build_timestamp)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VersionRecord]:
        return iter(self._records)
