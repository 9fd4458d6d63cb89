"""Built-in tracking parameter table.

Compiled from ClearURLs, the tracking-query-params-registry and vendor
documentation. Names are matched case-sensitively against query keys.
"""

TRACKING_PARAMS = (
    # Google Analytics & Ads
    'gclid', 'gclsrc', 'gbraid', 'wbraid', 'gad_source', 'srsltid',
    'utm_source', 'utm_medium', 'utm_campaign', 'utm_content', 'utm_term',
    'utm_id', 'utm_source_platform', 'utm_creative_format', 'utm_marketing_tactic',
    '_ga', '_gl', 'ei', 'oq', 'esrc', 'uact', 'cd', 'cad', 'aqs', 'sourceid',
    'sxsrf', 'rlz', 'pcampaignid', 'iflsig', 'fbs', 'ictx', 'cshid',
    'i-would-rather-use-firefox',

    # Google DoubleClick & Merchant Centre
    'dclid', 'gPromoCode', 'gQT',

    # Social media platforms
    'fbclid', 'twclid', 'ttclid', 'igshid', 'igsh', 'ScCid', 'ndclid', 'li_fat_id',

    # Search engines
    'yclid', 'msclkid', 'sk', 'sp', 'sc', 'qs', 'qp',

    # Email marketing
    'mc_cid', 'mc_eid', 'mc_tc', '_ke', '_kx', 'dm_i', 'ml_subscriber',
    'ml_subscriber_hash', 'mkt_tok',

    # Marketing automation
    '_bta_tid', '_bta_c', 'trk_contact', 'trk_msg', 'trk_module', 'trk_sid',
    'mkwid', 'pcrid', 'ef_id', 's_kwcid', 'rb_clickid', 'wickedid', 'vero_conv',
    'vero_id', 'oly_anon_id', 'oly_enc_id',

    # Piwik
    'pk_campaign', 'pk_kwd', 'pk_keyword', 'piwik_campaign', 'piwik_kwd', 'piwik_keyword',

    # Matomo
    'mtm_campaign', 'mtm_keyword', 'mtm_source', 'mtm_medium', 'mtm_content',
    'mtm_cid', 'mtm_group', 'mtm_placement', 'matomo_campaign', 'matomo_keyword',
    'matomo_source', 'matomo_medium', 'matomo_content', 'matomo_cid',
    'matomo_group', 'matomo_placement',

    # HubSpot
    'hsa_cam', 'hsa_grp', 'hsa_mt', 'hsa_src', 'hsa_ad', 'hsa_acc', 'hsa_net',
    'hsa_kw', 'hsa_tgt', 'hsa_ver', '__hssc', '__hstc', '__hsfp', '_hsenc',
    'hsCtaTracking', '_hsmi',

    # E-commerce & affiliate
    'mkevt', 'mkcid', 'mkrid', 'campid', 'toolid', 'customid', '_trksid',
    '_trkparms', '_from', 'hash', '_branch_match_id', 'irclickid', 'irgwc',
    'epik', 'tag', 'ref', 'source', 'campaign', 'ad_id', 'click_id',
    'campaign_id', 'affiliate_id', 'partner_id', 'referrer', 'tracking_id',
    'k_clickid', 'aff_request_id',

    # Amazon
    'qid', 'sr', 'sprefix', 'crid', 'keywords', 'ref_', 'th', 'linkCode',
    'creativeASIN', 'ascsubtag', 'aaxitk', 'hsa_cr_id', 'dchild', 'camp',
    'creative', 'content-id', 'dib', 'dib_tag', 'social_share', 'starsLeft',
    'skipTwisterOG', '_encoding', 'smid', 'field-lbr_brands_browse-bin',
    'qualifier', 'spIA', 'ms3_c', 'refRID',

    # Media platforms
    'si', 'feature', 'kw', 'pp', 'u_code', 'preview_pb', '_d', '_t', '_r',
    'timestamp', 'user_id', 'share_app_name', 'share_iid',

    # Facebook & friends
    '__tn__', 'eid', '__cft__', '__xts__', 'comment_tracking', 'dti', 'app',
    'video_source', 'ftentidentifier', 'pageid', 'padding', 'ls_ref',
    'action_history', 'tracking', 'referral_code', 'referral_story_type', 'eav',
    'sfnsn', 'idorvanity', 'wtsid', 'rdc', 'rdr', 'paipv', '_nc_x', '_rdr',
    'mibextid',

    # Twitter/X
    'cn', 'ref_url', 't', 's',

    # Reddit
    '%24deep_link', 'correlation_id', 'ref_campaign', 'ref_source', '%243p',
    '%24original_url', 'share_id',

    # SMS marketing
    'sms_source', 'sms_click', 'sms_uph',

    # Other platforms
    'rtid', 'vmcid', 'tw_source', 'tw_campaign', 'tw_term', 'tw_content',
    'tw_adid', 'cvid', 'ocid', '__twitter_impression', 'Echobox', 'spm',
    'ceneo_spo', '_openstat', 'os_ehash', 'cmpid', 'tracking_source',

    # GoDataFeed
    'gdfms', 'gdftrk', 'gdffi',

    # Springbot
    'redirect_log_mongo_id', 'redirect_mongo_id', 'sb_referer_host',

    # Drip
    '__s',

    # Seznam
    'sznclid',

    # Alibaba, Taobao
    'price', 'sourceType', 'suid', 'ut_sk', 'un', 'share_crt_v', 'sp_tk', 'cpp',
    'shareurl', 'short_name', 'pvid', 'algo_expid', 'algo_pvid', 'ns',
    'abbucket', 'ali_refid', 'ali_trackid', 'acm', 'utparam', 'pos', 'abtest',
    'trackInfo', 'utkn', 'scene', 'mytmenu', 'turing_bucket', 'lygClk', 'impid',
    'bftTag', 'bftRwd', 'activity_id', 'user_number_id',

    # Bilibili
    'callback', 'spm_id_from', 'from_source', 'from', 'seid', 'mid',
    'share_source', 'msource', 'refer_from', 'share_from', 'share_medium',
    'share_plat', 'share_tag', 'share_session_id', 'unique_k', 'vd_source',
    'plat_id', 'buvid', 'is_story_h5', 'up_id', 'bbid', 'ts', 'visit_id',
    'session_id', 'broadcast_type', 'is_room_feed',

    # Xiaohongshu
    'xhsshare', 'author_share', 'type', 'xsec_source', 'share_from_user_hidden',
    'app_version', 'ignoreEngage', 'app_platform', 'apptime', 'appuid',
    'shareRedId', 'exSource', 'verifyUuid', 'verifyType', 'verifyBiz',

    # News & media
    'ftag', 'intcid', 'CMP', 'sh', 'ito', 'shareToken', 'taid', '__source',
    'ncid', 'sr_share', 'guccounter', 'guce_referrer', 'guce_referrer_sig',

    # E-commerce, extended
    'loc', 'acampID', 'mpid', 'intl', 'u1', '_requestid', 'cid', 'dl', 'di',
    'sd', 'bi', 'partner', 'rtoken', 'ex', 'identityID', 'MID', 'RID',
    'riftinfo', 'epic_affiliate', 'epic_gameId', 'istCompanyId', 'istFeedId',
    'istItemId', 'istBid', 'clickOrigin', 'clickTrackInfo', 'abid', 'ad_src',
    'scm', 'src', 'pa', 'pid_pvid', 'did', 'mp', 'impsrc', 'publish_id',
    'sp_atk', 'xptdk',

    # Travel & booking
    'federated_search_id', 'search_type', 'source_impression_id',

    # Other services
    'refPageId', 'trackId', 'tctx', 'refer_method', 'from_search', 'from_srp',
    'rank', 'ac', 'context_referrer', 'ref_ctx_id', 'funnel', 'click_key',
    'click_sum', 'organic_search_click', 'source_location', 'psf_variant',
    'share_intent', 'funnelUUID', 'email_token', 'email_source', 'form_type',
    'as', 'platform', 'redirect_source', 'x', '_returnURL', 'redirectedFrom',
    'share', 'origin', 'ecid', 'PostType', 'ServiceType', 'UniqueID', 'TheTime',
    'trkid', 'whid', 'ddw', 'ds_ch', 'medium', 'content', 'snr', 'u',
    'tt_medium', 'tt_content', 'alid', 'vss', 'swnt', 'grpos', 'ptl', 'stl',
    'exp', 'plim', 'nb', 'wbdcd', 'tpa', 'webUserId', 'spMailingID', 'spUserID',
    'spJobID', 'spReportId', 'cm_lm', 'cm_mmc', 'int_campaign', 'lr',
    'redircnt', 'ecp', 'm_bt', 'iref', 'sc_referrer', 'sc_ua', 'email_referrer',
    'email_subject', 'link_id', 'can_id', 'refId', 'trk', 'trackingId', 'b',
    'h', 'cuid',

    # Session & misc
    'sessionid', '_', 'v', 'r',
)
